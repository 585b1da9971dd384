#!/usr/bin/env python3
"""
Sweet Spott Backend - Run Script
This script starts the FastAPI backend server
"""

import os
import sys
import subprocess
from pathlib import Path

def print_colored(message, color="blue"):
    """Print colored output"""
    colors = {
        "red": "\033[91m",
        "green": "\033[92m",
        "yellow": "\033[93m",
        "blue": "\033[94m",
        "reset": "\033[0m"
    }
    print(f"{colors.get(color, '')}{message}{colors['reset']}")

def check_file_exists(filepath, error_message):
    """Check if a file exists"""
    if not Path(filepath).exists():
        print_colored(f"❌ Error: {error_message}", "red")
        sys.exit(1)

def main():
    print_colored("🚀 Starting Sweet Spott Backend...", "blue")

    check_file_exists("sweetspott/main.py", "sweetspott/main.py not found. Please run this script from the backend directory.")

    # The API key may come from the environment or a .env file
    if not os.environ.get("GOOGLE_MAPS_API_KEY") and not any(Path(p).exists() for p in (".env", "../.env")):
        print_colored("⚠️  Warning: GOOGLE_MAPS_API_KEY is not set and no .env file was found.", "yellow")
        print("Searches will return no live results until you add:")
        print("  GOOGLE_MAPS_API_KEY=your_api_key_here")
        print("  LOGGER=20")
        print()

    print_colored("✅ All checks passed!", "green")
    print_colored("🌐 Starting Uvicorn server...", "blue")
    print("📍 Backend will be available at: http://localhost:8000")
    print("📍 API Health check: http://localhost:8000/health")
    print("📍 API Documentation: http://localhost:8000/docs")
    print()
    print("Press Ctrl+C to stop the server")
    print()

    # Run uvicorn with auto-reload for development
    try:
        subprocess.run([
            sys.executable, "-m", "uvicorn",
            "sweetspott.main:app",
            "--reload",
            "--host", "0.0.0.0",
            "--port", "8000"
        ], check=True)
    except KeyboardInterrupt:
        print_colored("\n👋 Backend server stopped.", "yellow")
    except subprocess.CalledProcessError as e:
        print_colored(f"\n❌ Error starting server: {e}", "red")
        sys.exit(1)

if __name__ == "__main__":
    main()
