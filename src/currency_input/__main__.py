"""Entry point for currency-input."""

from currency_input.app import CurrencyInputApp
from currency_input.config import parse_args, resolve_format_config, resolve_initial_value


def main() -> None:
    """Run the currency input demo."""
    args = parse_args()
    config = resolve_format_config(args)
    app = CurrencyInputApp(config, initial_value=resolve_initial_value(args.value))
    app.run()


if __name__ == "__main__":
    main()
