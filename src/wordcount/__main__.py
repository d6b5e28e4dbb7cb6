"""
Main entry point: ``python -m wordcount``.
"""
from wordcount.cli import app

if __name__ == "__main__":
    app(prog_name="wordcount")
