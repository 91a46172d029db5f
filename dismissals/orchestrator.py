"""
Cricket Dismissal Analyzer entry point.

Runs a scripted session through the full pipeline:
Pointer Input → Input Mapper → Pending Coordinate → Dismissal Store → Renderer

Usage:
    python -m dismissals.orchestrator --demo
    python -m dismissals.orchestrator --demo --debounce-ms 250 -v
"""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace

from dismissals.config import AnalyzerConfig

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger("dismissals.orchestrator")

# (client_x, client_y, seconds since start, form values or None for cancel)
DEMO_SCRIPT = [
    (612.0, 180.0, 0.0, ("caught", "Smith", "25", "20", "Edged to slip")),
    (340.0, 600.0, 1.0, ("bowled", "Jones", "10", "8", "")),
    (345.0, 602.0, 1.2, ("bowled", "Jones", "99", "99", "")),  # Inside debounce window
    (40.0, 40.0, 2.0, ("other", "", "", "", "")),  # Off the field
    (820.0, 420.0, 3.0, None),
    (640.0, 410.0, 4.0, ("bowled", "", "0", "", "Yorker")),
    (590.0, 500.0, 5.0, ("lbw", "Patel", "15", "abc", "")),
]


def run_demo(config: AnalyzerConfig) -> None:
    """Replay a fixed sequence of clicks and form entries."""
    from dismissals.input.mapper import BoundingBox, InputMapper, PointerEvent, SurfaceTransform
    from dismissals.render.panel import TextPanelRenderer, detail_lines
    from dismissals.state.session import AnalyzerSession, FormFields
    from dismissals.state.store import DismissalStore

    logger.info("=" * 60)
    logger.info("CRICKET DISMISSAL ANALYZER - DEMO MODE")
    logger.info("=" * 60)
    logger.info("Debounce window: %d ms", config.mapper.debounce_ms)

    # Surface drawn at 1:1 scale, offset 20px from the client origin
    surface = SurfaceTransform(
        bounds=BoundingBox(left=20.0, top=20.0, width=1200.0, height=800.0),
        matrix=(1.0, 0.0, 0.0, 1.0, 20.0, 20.0),
    )

    renderer = TextPanelRenderer()
    session = AnalyzerSession(
        mapper=InputMapper(config.geometry, config.mapper),
        store=DismissalStore(),
        renderer=renderer,
    )

    for client_x, client_y, at, form in DEMO_SCRIPT:
        result = session.handle_pointer(PointerEvent(client_x, client_y, timestamp=at), surface)
        if not result.accepted:
            logger.info("Click (%.0f, %.0f) rejected: %s", client_x, client_y, result.rejection.value)
            continue
        if form is None:
            session.handle_key("Escape")
            logger.info("Click (%.0f, %.0f) cancelled", client_x, client_y)
            continue
        kind, bowler, runs, balls, notes = form
        session.submit(FormFields(kind, bowler, runs, balls, notes))

    records = session.store.list()
    if records:
        logger.info("Latest dismissal:")
        for line in detail_lines(records[-1]):
            logger.info("  %s", line)

    # Delete the first dismissal, confirming unconditionally
    if records:
        session.request_delete(records[0].id, confirm=lambda record: True)

    print("\n" + session.statistics().summary_str())


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Cricket Dismissal Analyzer",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m dismissals.orchestrator --demo
  python -m dismissals.orchestrator --demo --debounce-ms 250
        """,
    )

    mode = parser.add_mutually_exclusive_group(required=True)
    mode.add_argument("--demo", action="store_true", help="Replay a scripted session")

    parser.add_argument("--debounce-ms", type=int, help="Override the click debounce window")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    args = parser.parse_args()

    try:
        config = AnalyzerConfig.from_env()
        if args.debounce_ms is not None:
            config = AnalyzerConfig(
                geometry=config.geometry,
                mapper=replace(config.mapper, debounce_ms=args.debounce_ms),
                log_level=config.log_level,
            )
        config.validate()
    except ValueError as exc:
        logger.error("Invalid configuration: %s", exc)
        sys.exit(1)

    logging.getLogger().setLevel(logging.DEBUG if args.verbose else config.log_level.upper())

    if args.demo:
        run_demo(config)


if __name__ == "__main__":
    main()
