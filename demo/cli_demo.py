#!/usr/bin/env python3
"""
Interactive CLI demo for the seat assistant.

Loads a venue JSON file and lets you type what you would say to the voice
assistant. Typed text stands in for the speech recognizer's transcript.

Usage:
    PYTHONPATH=src python demo/cli_demo.py [path/to/venue.json]
"""
import sys
from pathlib import Path

# Imports assume PYTHONPATH=src is set (or the package is installed)
from seat_assistant.config_loader import load_config_from_env
from seat_assistant.exceptions import SeatAssistantError
from seat_assistant.service import SeatAssistantService
from seat_assistant.utils import configure_logging

DEFAULT_VENUE = Path(__file__).parent / "mock_venue.json"
SESSION_ID = "cli"


def print_banner():
    """Print welcome banner."""
    print("\n" + "=" * 60)
    print("  Seat Assistant - Interactive CLI Demo")
    print("=" * 60)
    print("\nTell me what kind of seat you want. Try:")
    print("  • closer to the stage")
    print("  • very cheap")
    print("  • aisle seat with a clear view")
    print("  • option two")
    print("\nType 'quit' or 'exit' to end the session.")
    print("-" * 60 + "\n")


def print_response(response):
    """Print formatted assistant response."""
    if response.message:
        print(f"\nAssistant: {response.message}")

    for line in response.announcements:
        print(f"  {line}")

    if response.selection:
        print(f"  -> selected seat {response.selection.seat_id}")

    weights = ", ".join(f"{k}={v:.2f}" for k, v in response.weights.to_dict().items())
    print(f"  weights: {weights}")
    print("-" * 60)


def setup_service(venue_path: Path) -> SeatAssistantService:
    """Create the service and load the venue into the demo session."""
    config = load_config_from_env()
    configure_logging(config.log_level)

    service = SeatAssistantService(config)
    service.set_seat_selector(lambda seat_id: True)

    print_response(service.load_venue(SESSION_ID, venue_path))
    print_response(service.recommend(SESSION_ID))
    return service


def main():
    """Main CLI loop."""
    print_banner()
    venue_path = Path(sys.argv[1]) if len(sys.argv) > 1 else DEFAULT_VENUE

    try:
        service = setup_service(venue_path)
    except SeatAssistantError as e:
        print(f"\n❌ Failed to initialize: {e}")
        return 1

    while True:
        try:
            text = input("You: ").strip()

            if not text:
                continue

            if text.lower() in ['quit', 'exit', 'q']:
                print("\n👋 Enjoy the show! Goodbye!\n")
                break

            print_response(service.handle_utterance(SESSION_ID, text))

        except KeyboardInterrupt:
            print("\n\n👋 Interrupted. Goodbye!\n")
            break
        except EOFError:
            print("\n\n👋 Goodbye!\n")
            break

    return 0


if __name__ == "__main__":
    sys.exit(main())
