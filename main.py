"""
Sutom Game Server - Main Entry Point

This is the main entry point for the Sutom game server.
It loads the dictionary, initializes the game service and starts the
Flask-SocketIO application. Games live in memory only and never expire.
"""

from sutom import create_app
from sutom.config import Config
from sutom.utils.game_logger import game_logger


def main():
    """Main function to initialize services and start the server."""
    try:
        print("Creating Flask application...")
        app, socketio = create_app(Config)
        stats = app.extensions['sutom'].word_repository.statistics()
        print(f"✓ Dictionary loaded: {stats['solutions']} solutions, "
              f"{stats['accepted_guesses']} accepted guesses")

        game_logger.logger.info("Sutom Server Starting")

        print(f"\nStarting Sutom Game Server on {Config.HOST}:{Config.PORT}")
        print(f"Debug mode: {Config.DEBUG}")
        print("=" * 50)

        socketio.run(app, host=Config.HOST, port=Config.PORT, debug=Config.DEBUG)

    except KeyboardInterrupt:
        print("\nServer shutting down...")
        game_logger.logger.info("Sutom Server shutting down (KeyboardInterrupt)")
    except Exception as e:
        print(f"Error starting server: {e}")
        game_logger.logger.error(f"Error starting server: {e}")
        raise


if __name__ == '__main__':
    main()
