#!/usr/bin/env python
"""
Run the article registry HTTP server.
"""
import logging
import os
import sys

import uvicorn

from article_registry.article_store_factory import create_article_store
from article_registry.config import Config
from server import create_app


def main():
    """Run the article registry server."""
    config = Config()

    logging.getLogger('server').setLevel(config.log_level)

    # Allow command-line argument to override environment variable
    port = config.server_port
    host = config.server_host

    if len(sys.argv) > 1:
        try:
            port = int(sys.argv[1])
        except ValueError:
            print(f"Invalid port number: {sys.argv[1]}")
            sys.exit(1)

    app = create_app(store=create_article_store(config))

    print(f"Starting Article Registry on http://{host}:{port}")
    if config.storage_type == "local":
        print(f"Data file: {os.path.abspath(os.path.join(config.data_dir, config.data_filename))}")
    print("Press Ctrl+C to stop")

    uvicorn.run(app, host=host, port=port, log_level=config.log_level.lower())


if __name__ == "__main__":
    main()
