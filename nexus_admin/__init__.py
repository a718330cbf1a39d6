"""
Nexus Admin
Admin panel API for a training and recruiting company.

Architecture:
- MongoDB: every entity (users, trainings, postings, content ...)
- JSON file: site-wide settings
- Local disk: uploaded images
"""

__version__ = "1.0.0"
