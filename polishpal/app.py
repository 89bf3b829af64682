#!/usr/bin/env python3
"""
PolishPal - Main Application Entry Point

AI-powered proofreading service: forwards text to a correction provider
and reports the word-level changes it made.

Usage:
    python -m polishpal.app                                   # Run development server
    waitress-serve --host=0.0.0.0 --port=8787 polishpal.app:app  # Run with Waitress
"""

import os
import logging
from polishpal.env_loader import load_config
from polishpal.api import create_app

# Ensure logs directory exists
os.makedirs('logs', exist_ok=True)

# Configure logging with UTF-8 encoding
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[
        logging.FileHandler('logs/polishpal.log', encoding='utf-8'),
        logging.StreamHandler()
    ]
)

# Create Flask application
app = create_app(load_config())

if __name__ == '__main__':
    # Development server - for production use Waitress
    print("""
    ╔══════════════════════════════════════════════════════════════╗
    ║                          PolishPal                           ║
    ║                AI Text Proofreading Service                  ║
    ╠══════════════════════════════════════════════════════════════╣
    ║  API:    POST http://localhost:8787/api/proofread            ║
    ║  Health: http://localhost:8787/health                        ║
    ║                                                              ║
    ║  For production use:                                         ║
    ║  waitress-serve --host=0.0.0.0 --port=8787 polishpal.app:app ║
    ╚══════════════════════════════════════════════════════════════╝
    """)

    app.run(debug=False, host='0.0.0.0', port=int(os.getenv('PORT', '8787')))
