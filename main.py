"""
WrathWord Game Server - Main Entry Point

This is the main entry point for the game server.
It validates the bundled word lists, builds the Flask application and starts it.
"""

import os

from wrathword import create_app
from wrathword.config import config, load_word_lists, validate_word_list_integrity
from wrathword.utils.game_logger import game_logger


def main():
    """Main function to validate configuration and start the server."""
    try:
        config_class = config[os.getenv('WRATHWORD_ENV', 'default')]

        print("Validating word lists...")
        answers, allowed = load_word_lists()
        validate_word_list_integrity(answers)
        validate_word_list_integrity(allowed)
        print("✓ Word lists valid")

        # Create Flask app
        print("Creating Flask application...")
        app = create_app(config_class)
        print("✓ Flask application created successfully")

        game_logger.logger.info(f"WrathWord Server Starting - storage backend: {config_class.STORAGE_BACKEND}")

        print(f"\nStarting WrathWord Game Server on {config_class.HOST}:{config_class.PORT}")
        print(f"Debug mode: {config_class.DEBUG}")
        print(f"Storage backend: {config_class.STORAGE_BACKEND}")
        print("=" * 50)

        app.run(host=config_class.HOST, port=config_class.PORT, debug=config_class.DEBUG)

    except KeyboardInterrupt:
        print("\nServer shutting down...")
        game_logger.logger.info("WrathWord Server shutting down (KeyboardInterrupt)")
    except Exception as e:
        print(f"Error starting server: {e}")
        game_logger.logger.error(f"Error starting server: {e}")
        raise


if __name__ == '__main__':
    main()
