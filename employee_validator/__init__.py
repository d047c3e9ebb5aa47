"""
Employee Validator — heuristic scoring for employee-profile form fields.

Scores password, name, email, Cambodian phone number, bio and skills against
rule-based point tables, combines the five profile fields into a score out of
100, and exposes everything over a small FastAPI service. Bio scoring can be
enriched by an external text-quality checker (LanguageTool, OpenAI, Gemini).
"""

__version__ = "0.1.0"
