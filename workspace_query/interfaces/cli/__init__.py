"""CLI interface (argparse)."""
