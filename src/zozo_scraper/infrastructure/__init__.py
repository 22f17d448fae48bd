# 🏗️ zozo_scraper/infrastructure/__init__.py
