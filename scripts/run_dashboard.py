"""
Run Streamlit Dashboard
=======================

Script to start the churn pipeline walkthrough.

Usage:
    python scripts/run_dashboard.py
    python scripts/run_dashboard.py --port 8501 --browser
"""

import argparse
import subprocess
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))


def parse_args(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="Run the churn pipeline dashboard")

    parser.add_argument(
        "--port",
        type=int,
        default=8501,
        help="Port to run on"
    )
    parser.add_argument(
        "--browser",
        action="store_true",
        help="Open browser automatically"
    )

    return parser.parse_args(argv)


def build_command(port: int, browser: bool) -> list:
    """Build the streamlit command line."""
    dashboard_path = project_root / "telecom_churn" / "dashboard" / "app.py"

    return [
        sys.executable, "-m", "streamlit", "run",
        str(dashboard_path),
        "--server.port", str(port),
        "--server.headless", str(not browser).lower(),
    ]


def main():
    """Run the dashboard."""
    args = parse_args()

    print(f"""
    ╔═══════════════════════════════════════════════════╗
    ║       Telecom X Churn Pipeline Dashboard          ║
    ╠═══════════════════════════════════════════════════╣
    ║  URL: http://localhost:{args.port}                      ║
    ╚═══════════════════════════════════════════════════╝
    """)

    subprocess.run(build_command(args.port, args.browser))


if __name__ == "__main__":
    main()
