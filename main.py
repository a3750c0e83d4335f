# main.py
from __future__ import annotations
import json
import logging

from dotenv import load_dotenv

from agents.travel_agent import TravelAgent
from utils.config import configure_logging

EXAMPLE_REQUEST = (
    "I want to spend 2 days in Bordeaux exploring food and culture. "
    "I am solo travelling and generally prefer a relaxed pace and a medium budget trip."
)

logger = logging.getLogger("main")


def main() -> None:
    load_dotenv()
    configure_logging()

    agent = TravelAgent()
    try:
        trip = agent.generate_trip(EXAMPLE_REQUEST)
    except Exception as e:
        logger.error("Trip generation failed: %s", e)
        raise
    print(json.dumps(trip.to_dict(), indent=2, ensure_ascii=False))


if __name__ == "__main__":
    main()
