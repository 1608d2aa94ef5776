# ABOUTME: Command-line check of the live NDBC buoy feed and current scores for every spot
# ABOUTME: Hits the network; run manually, not part of the test suite

import argparse
import json
import logging

from surfcast.buoy.client import BuoyClient
from surfcast.config import Config
from surfcast.orchestrator import ForecastOrchestrator
from surfcast.spots.profiles import SPOT_PROFILES


def main():
    parser = argparse.ArgumentParser(description="Fetch the buoy and score current conditions.")
    parser.add_argument("--station", default=Config.BUOY_STATION_ID, help="NDBC station id")
    parser.add_argument("--json", action="store_true", help="Print raw output as JSON")
    args = parser.parse_args()

    logging.basicConfig(level=Config.LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    orchestrator = ForecastOrchestrator(buoy_client=BuoyClient(station_id=args.station))
    reading = orchestrator.get_buoy_reading()

    if reading is None:
        print(f"Buoy {args.station}: no data")
        return

    print("=" * 50)
    print(f"BUOY {args.station}")
    print("=" * 50)
    print(reading)
    if reading.dominant_component:
        print(f"Dominant:  {reading.dominant_component}")
    if reading.has_wind:
        print(f"Wind:      {reading.wind_speed_kts:.1f}kts from {reading.wind_direction_deg:.0f}°")
    print(f"Mean dir:  {reading.direction_label}")
    print()

    for key in SPOT_PROFILES:
        output = orchestrator.current_conditions(key)
        if output is None:
            continue
        if args.json:
            print(json.dumps(output.to_dict(), indent=2))
        else:
            print(output)


if __name__ == "__main__":
    main()
