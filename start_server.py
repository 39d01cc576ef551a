#!/usr/bin/env python3
"""
Startup script for the image merge server
"""

import os
import sys
from pathlib import Path


def check_environment():
    """Check if environment is properly configured"""
    print("🔍 Checking environment...")

    from dotenv import load_dotenv
    if Path('.env').exists():
        load_dotenv()
        print("✅ Loaded .env")
    else:
        print("⚠️  .env file not found. Using system environment variables only.")

    from merger.config import get_api_key, get_standard_model, get_high_res_model

    if not get_api_key():
        print("❌ GEMINI_API_KEY not found in environment")
        print("   Add GEMINI_API_KEY (or GOOGLE_API_KEY) to your .env file")
        return False
    print("✅ Gemini API key configured")
    print(f"   Standard model:  {get_standard_model()}")
    print(f"   High-res model:  {get_high_res_model()}")

    return True


def start_server():
    """Start the Flask server"""
    print("\n🚀 Starting Image Merge Server...")
    print("=" * 50)

    port = int(os.getenv('PORT', '5000'))

    # Import and run the app
    from app import app

    print("✅ Server starting successfully!")
    print("\n📡 Available endpoints:")
    print(f"   Health:        http://localhost:{port}/health")
    print(f"   API Options:   http://localhost:{port}/api/v1/options")
    print(f"   API Merge:     http://localhost:{port}/api/v1/merge")
    print("\n" + "=" * 50)

    app.run(debug=True, host='0.0.0.0', port=port)


def main():
    """Main startup function"""
    print("🎨 Image Merge Server")
    print("=" * 50)

    if not check_environment():
        print("\n❌ Environment check failed. Please fix the issues above.")
        sys.exit(1)

    start_server()


if __name__ == "__main__":
    main()
