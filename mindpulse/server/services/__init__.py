"""
Server-side services.

Modules:
- accounts: user registration, Firebase sync, guests and profile updates
- progress: check-in streaks
- recommendations: rule-based recommendation engine
- email: SMTP replies to contact-support messages
- deps: FastAPI dependency wiring
"""
