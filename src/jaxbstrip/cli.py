# Author: Bradley R. Kinnard — for when there's no maven to hold your hand

"""
Command line entry. Flags override REPRODUCIBLE_* settings.
exit 0: done (skip, nothing matched and per-file failures included)
exit 1: the walk or the temp file blew up
exit 2: bad arguments / unknown encoding
"""

import argparse
import logging
import sys
import uuid
from pathlib import Path

from pydantic import ValidationError

from src.jaxbstrip.adapters.metrics_client import dump_metrics
from src.jaxbstrip.config import Settings
from src.jaxbstrip.core.errors import StripError
from src.jaxbstrip.core.models import NormalizationJob
from src.jaxbstrip.logging_config import set_run_id, setup_logging
from src.jaxbstrip.services.normalizer_service import normalize

log = logging.getLogger(__name__)


def parse_args(argv=None):
    p = argparse.ArgumentParser(
        prog="jaxbstrip",
        description="Strip the non-reproducible xjc header from ObjectFactory.java files"
    )
    p.add_argument("--generated-directory", type=Path, default=None,
                   help="Root to walk (default: REPRODUCIBLE_GENERATED_DIRECTORY or target/generated-sources)")
    p.add_argument("--encoding", default=None, help="Source encoding (default: platform encoding)")
    p.add_argument("--skip", action="store_true", default=None, help="Do nothing, log that we did nothing")
    p.add_argument("--log-level", default=None)
    p.add_argument("--metrics-file", type=Path, default=None, help="Write prometheus metrics here after the run")
    return p.parse_args(argv)


def build_job(args, settings: Settings) -> NormalizationJob:
    return NormalizationJob(
        root=args.generated_directory or settings.generated_directory,
        encoding=args.encoding or settings.resolved_encoding(),
        skip=settings.skip if args.skip is None else args.skip,
    )


def main(argv=None) -> int:
    args = parse_args(argv)
    try:
        settings = Settings()
    except ValidationError as e:
        print(f"jaxbstrip: invalid configuration: {e}", file=sys.stderr)
        return 2

    setup_logging(level=args.log_level or settings.log_level)
    set_run_id(uuid.uuid4().hex[:12])

    try:
        job = build_job(args, settings)
    except ValidationError as e:
        log.error(f"invalid job: {e}")
        return 2

    try:
        normalize(job)
    except StripError as e:
        # str(e) carries the kind: traversal_failed, temp_artifact_failed
        log.error(f"run over {job.root.absolute()} aborted: {e}")
        return 1
    finally:
        if args.metrics_file:
            dump_metrics(args.metrics_file)
    return 0


if __name__ == "__main__":
    sys.exit(main())
