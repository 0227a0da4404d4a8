"""
Personal site: profile page and markdown blog, served by Flask and frozen to static HTML
"""
__version__ = '0.1.0'
