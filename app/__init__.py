"""EasyBuk notification service package."""
