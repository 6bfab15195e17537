"""Robots.txt Lite: edit and serve the site's robots.txt from the admin."""

VERSION = '1.0.0'
