"""Allow running as: python -m ribbit"""
from ribbit.pipeline.cli import cli

if __name__ == "__main__":
    cli(obj={})
