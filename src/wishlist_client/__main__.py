"""Main entry point for the wishlist_client package."""

from wishlist_client.cli import main

if __name__ == "__main__":
    main()
