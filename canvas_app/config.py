# config.py

import os
from dotenv import load_dotenv

# Get the base directory of the application
basedir = os.path.abspath(os.path.dirname(__file__))

# The deployment root is one level above the package; the database file,
# the .env file and index.html all live there.
rootdir = os.path.abspath(os.path.join(basedir, '..'))

load_dotenv(os.path.join(rootdir, '.env'))
# --------------------------------------

class Config:
    """
    Contains all the configuration variables for the application.
    Values are read once when the app is created and never mutated afterwards.
    """
    # --- Server Settings ---
    PORT = int(os.environ.get('PORT') or 3000)
    HOST = os.environ.get('HOST') or '0.0.0.0'
    ENVIRONMENT = os.environ.get('FLASK_ENV') or 'development'

    # --- Access Key ---
    # The single shared secret protecting /api/load and /api/save.
    ACCESS_KEY = os.environ.get('ACCESS_KEY') or 'barzin2025'

    # --- Database Settings ---
    # Reads the database URL from the .env file.
    # Defaults to a SQLite file at the deployment root.
    DATABASE_FILE = os.path.join(rootdir, 'database.sqlite')
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL') or \
        'sqlite:///' + DATABASE_FILE

    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # --- Static Frontend ---
    STATIC_ROOT = rootdir
    INDEX_FILE = 'index.html'

    # --- Canvas Record Settings ---
    # Format marker attached to every loaded record; the frontend checks it
    # before importing data.
    CANVAS_FORMAT_VERSION = '3.0'
