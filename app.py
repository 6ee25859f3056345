"""
Member Directory
Application Entry Point

This file serves as the entry point for the Flask application.
It uses the application factory pattern defined in the member_directory package.
"""

from member_directory import create_app

# Create the Flask application using the factory
app = create_app()

if __name__ == '__main__':
    app.run(debug=app.config['DEBUG'], host=app.config['HOST'], port=app.config['PORT'])
