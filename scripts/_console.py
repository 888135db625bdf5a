"""Terminal output helpers shared by the CLI scripts."""


class Colors:
    """Terminal color codes."""

    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    RED = "\033[91m"
    BLUE = "\033[94m"
    BOLD = "\033[1m"
    END = "\033[0m"


def print_header(text: str) -> None:
    """Print a formatted header."""
    print(f"\n{Colors.BOLD}{'=' * 60}{Colors.END}")
    print(f"{Colors.BOLD}{text}{Colors.END}")
    print(f"{Colors.BOLD}{'=' * 60}{Colors.END}\n")


def print_success(text: str) -> None:
    print(f"{Colors.GREEN}  [OK] {text}{Colors.END}")


def print_warning(text: str) -> None:
    print(f"{Colors.YELLOW}  [SKIP] {text}{Colors.END}")


def print_error(text: str) -> None:
    print(f"{Colors.RED}  [ERROR] {text}{Colors.END}")


def print_info(text: str) -> None:
    print(f"{Colors.BLUE}  [INFO] {text}{Colors.END}")
