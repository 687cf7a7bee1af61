import argparse
import logging
import sys
from datetime import date

from oberweather.config import LOG_LEVEL, WEATHER_SERIES_DAYS, WEATHER_START_DATE
from oberweather.data.synthetic import default_rng, generate_series
from oberweather.met.series import period_label, summarize
from oberweather.utils.export import serialize


def main(argv=None):
    parser = argparse.ArgumentParser(description="Generate a synthetic Oberursel weather series.")
    parser.add_argument("--start", type=date.fromisoformat, default=WEATHER_START_DATE)
    parser.add_argument("--days", type=int, default=WEATHER_SERIES_DAYS)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--tsv", action="store_true", help="Tab-separated instead of CSV.")
    parser.add_argument("--out", type=str, default=None, help="Output file (default: stdout).")
    parser.add_argument("--log-level", type=str, default=LOG_LEVEL)
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s :: %(message)s",
    )
    if args.days < 1:
        parser.error("--days must be at least 1")

    series = generate_series(args.start, args.days, default_rng(args.seed))
    stats = summarize(series)
    logging.info(
        "%s: avg temp %.1f C, humidity %.1f %%, VPD %.3f kPa, PAR %d",
        period_label(series),
        stats.avg_temp,
        stats.avg_humidity,
        stats.avg_vpd,
        stats.avg_par,
    )

    text = serialize(series, "\t" if args.tsv else ",")
    if args.out:
        with open(args.out, "w", encoding="utf-8") as fh:
            fh.write(text + "\n")
        logging.info("Wrote %d records to %s", len(series), args.out)
    else:
        sys.stdout.write(text + "\n")


if __name__ == "__main__":
    main()
