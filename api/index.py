"""
Vercel Serverless Entry Point

This file serves as the bridge between Vercel's serverless runtime and the Flask application.

Architecture:
- Vercel calls this file for every request to /api/*
- create_app() bootstraps the canvas table on cold start
- The Flask app handles routing via blueprints in canvas_app/api/
"""

from canvas_app import create_app

# Vercel requires the app to be exported as 'app'
app = create_app()
