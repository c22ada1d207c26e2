"""
Kotoba Quiz - A Japanese vocabulary flashcard companion.

This package provides a desktop application with:
- Dictionary browsing of categorized word lists
- Practice quizzes (read, translate, listen) with proficiency tracking
- Timed auto-advance between cards
- Japanese text-to-speech
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
