from __future__ import annotations

import argparse
import sys

from contact_proxy.clients.freshdesk import FreshdeskClient
from contact_proxy.core.config import Settings, get_settings
from contact_proxy.core.logging import configure_logging
from contact_proxy.models.form import ContactForm
from contact_proxy.services.form_submitter import FormSubmitter


def parse_custom_fields(pairs: list[str]) -> dict[str, str] | None:
    if not pairs:
        return None

    custom_fields: dict[str, str] = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key.strip():
            raise ValueError(f"Custom field must look like key=value, got: {pair!r}")
        custom_fields[key.strip()] = value.strip()
    return custom_fields


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Create a Freshdesk ticket from contact details.")
    parser.add_argument("--name", required=True)
    parser.add_argument("--email", required=True)
    parser.add_argument("--message", required=True)
    parser.add_argument("--tag", dest="tags", action="append", default=None)
    parser.add_argument(
        "--custom-field",
        dest="custom_fields",
        action="append",
        default=[],
        metavar="KEY=VALUE",
    )
    return parser


def run(argv: list[str] | None = None, settings: Settings | None = None) -> int:
    args = build_parser().parse_args(argv)
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    if not settings.freshdesk_configured:
        print("FRESHDESK_DOMAIN and FRESHDESK_API_KEY must be set.", file=sys.stderr)
        return 1

    try:
        custom_fields = parse_custom_fields(args.custom_fields)
    except ValueError as exc:
        print(str(exc), file=sys.stderr)
        return 2

    submitter = FormSubmitter(
        client=FreshdeskClient.from_settings(settings),
        default_tags=settings.ticket_default_tags_list,
    )
    form = ContactForm(name=args.name, email=args.email, message=args.message)
    outcome = submitter.submit(form, tags=args.tags, custom_fields=custom_fields)
    print(form.status_text)
    return 0 if outcome.succeeded else 1


def main() -> None:
    sys.exit(run())


if __name__ == "__main__":
    main()
