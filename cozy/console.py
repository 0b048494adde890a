# Cozy Flag Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global console instance used for usage output."""
from rich.console import Console

console = Console(highlight=False)
