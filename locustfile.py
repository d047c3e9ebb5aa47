from locust import HttpUser, task, between
import random

# Sample profiles: mix of clean, partial and invalid input
profiles = [
    {
        "name": "Sok Dara",
        "email": "sok.dara@gmail.com",
        "phone": "+855 12 345 678",
        "bio": "Backend engineer with six years of experience building payment services in Phnom Penh.",
        "skills": "Python, FastAPI, PostgreSQL, Docker, Kubernetes",
    },
    {
        "name": "chan",
        "email": "a@a.co",
        "phone": "012 345 678",
        "bio": "i like computers and stuff",
        "skills": "JS, js, Python",
    },
    {
        "name": "",
        "email": "not-an-email",
        "phone": "abc",
        "bio": "too short",
        "skills": ",,,",
    },
]

passwords = ["", "password123", "Passw0rd!Aa1234567", "x9#Lm$Qv7&Rt2@Wz"]

class ValidatorUser(HttpUser):
    wait_time = between(1, 2)

    @task(3)
    def validate_all(self):
        self.client.post("/validate-all", json=random.choice(profiles))

    @task(1)
    def check_password(self):
        self.client.post("/check-password", json={"password": random.choice(passwords)})
