"""
Startup script for the ValorMind AI API
Reads HOST and PORT from environment and starts uvicorn server
"""
import os
import uvicorn
from valormind.main import app

if __name__ == "__main__":
    port = int(os.getenv("PORT", 8000))
    host = os.getenv("HOST", "0.0.0.0")

    print(f"🚀 Starting ValorMind AI API server...")
    print(f"📍 Binding to {host}:{port}")

    uvicorn.run(
        app,
        host=host,
        port=port,
        log_level="info"
    )
