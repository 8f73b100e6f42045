"""
Word Ladder Engine - Main Entry Point

Creates the application, loads the dictionary in the background and starts
the development server.
"""

from wordladder import create_app
from wordladder.config import Config
from wordladder.utils.ladder_logger import ladder_logger


def main():
    """Main function to build the engine and start the server."""
    try:
        print("Creating application...")
        app = create_app(Config)
        print(f"Loading dictionary from {Config.WORDLIST_PATH} in the background")

        ladder_logger.logger.info(
            f"Word Ladder Engine starting - heuristic={Config.PATH_HEURISTIC}, "
            f"expert depth={Config.EXPERT_SEARCH_DEPTH}"
        )

        print(f"\nStarting Word Ladder Engine on {Config.HOST}:{Config.PORT}")
        print(f"Debug mode: {Config.DEBUG}")
        print("=" * 50)

        app.run(host=Config.HOST, port=Config.PORT, debug=Config.DEBUG, use_reloader=False)

    except KeyboardInterrupt:
        print("\nServer shutting down...")
        ladder_logger.logger.info("Word Ladder Engine shutting down (KeyboardInterrupt)")
    except Exception as e:
        print(f"Error starting server: {e}")
        ladder_logger.logger.error(f"Error starting server: {e}")
        raise


if __name__ == '__main__':
    main()
