# power2lms/_utils/__init__.py
