"""
📑 Balance Sheet Pro - API Server
Extract. Calculate. Export. Loan renewal balance sheets from bank statements
"""

import os

import uvicorn
from dotenv import load_dotenv

from balance_sheet_pro.config import load_settings


def main():
    # Load environment variables
    load_dotenv()

    print("📑 Balance Sheet Pro")
    print("=" * 50)
    print("🔧 Loading environment variables...")

    # Fail fast on bad tunables instead of on the first upload
    settings = load_settings()
    print(f"✅ Page cap: {settings.page_cap} | Marker window: {settings.marker_window} | "
          f"Unit prefix: {settings.scale_prefix_chars} chars")

    port = int(os.getenv("API_PORT", "8000"))
    print("🚀 Starting FastAPI server...")
    print(f"📍 API will be available at: http://localhost:{port}")
    print(f"📚 API docs available at: http://localhost:{port}/docs")
    print("=" * 50)

    uvicorn.run(
        "balance_sheet_pro.api.main:app",
        host="0.0.0.0",
        port=port,
        reload=True,
        log_level=os.getenv("LOG_LEVEL", "info").lower()
    )


if __name__ == "__main__":
    main()
