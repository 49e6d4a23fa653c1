"""
Quick launcher for Streamlit dashboard
"""
import os
import subprocess
import sys


def main():
    """Launch Streamlit dashboard"""
    # Ensure we're in the right directory
    script_dir = os.path.dirname(os.path.abspath(__file__))
    os.chdir(script_dir)

    print("Starting Streamlit dashboard...")
    print("Dashboard will open in your browser at http://localhost:8501")
    return subprocess.run([sys.executable, "-m", "streamlit", "run", "streamlit_app.py"]).returncode


if __name__ == "__main__":
    sys.exit(main())
