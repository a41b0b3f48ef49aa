import sys
import logging
from canvas_app import create_app
from canvas_app.errors import StorageError

# This is the entry point for the application.
# create_app() bootstraps the database before returning; if that fails the
# process exits with a non-zero status instead of serving requests.
try:
    app = create_app()
except StorageError as e:
    logging.basicConfig(level=logging.ERROR)
    logging.getLogger(__name__).error("Error starting server: %s", e.message, exc_info=True)
    sys.exit(1)

if __name__ == '__main__':
    app.logger.info("Server running on port %s", app.config['PORT'])
    app.logger.info("Database file: %s", app.config['SQLALCHEMY_DATABASE_URI'])
    app.logger.info("Address: http://localhost:%s", app.config['PORT'])
    app.run(host=app.config['HOST'], port=app.config['PORT'],
            debug=app.config['ENVIRONMENT'] == 'development')
