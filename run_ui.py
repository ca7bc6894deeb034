"""
📑 Balance Sheet Pro - Streamlit UI
Extract. Calculate. Export. Loan renewal balance sheets from bank statements
"""

import os
import subprocess
import sys
from pathlib import Path

from dotenv import load_dotenv


def main():
    # Load environment variables
    load_dotenv()

    print("📑 Balance Sheet Pro")
    print("=" * 50)
    print("🎨 Starting Streamlit UI...")

    print(f"🔗 Extraction API: {os.getenv('API_BASE_URL', 'http://localhost:8000/api/v1')} (start it with run_api.py)")
    print("=" * 50)

    port = os.getenv("UI_PORT", "8501")
    subprocess.run([
        sys.executable, "-m", "streamlit", "run",
        str(Path(__file__).parent / "balance_sheet_pro" / "ui" / "main.py"),
        f"--server.port={port}",
        "--theme.primaryColor=#2563EB"
    ])


if __name__ == "__main__":
    main()
