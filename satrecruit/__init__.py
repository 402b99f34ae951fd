"""
Satellite Team Recruitment API
Backend of a student satellite team's recruitment site.

Architecture:
- Relational store: departments, applicants, about-us content, admin users
- Disk: uploaded resumes (PDF/DOC/DOCX)
- FastAPI: public routes plus JWT-protected /admin routes
"""

__version__ = "1.0.0"
