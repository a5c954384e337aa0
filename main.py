import json
import logging
import sys
import argparse

from pydantic import ValidationError

from carematch.config_loader import load_config
from web.backend.exceptions import InvalidSnapshotException
from web.backend.models.requests import ComputeMatchRequest, RankCaregiversRequest
from web.backend.services.match_service import MatchService

logger = logging.getLogger(__name__)


def run(input_path: str, config_path: str, rank: bool) -> dict:
    """Score the snapshots in ``input_path`` and return the JSON-ready result."""
    config = load_config(config_path)
    logging.getLogger().setLevel(config.log_level.upper())

    with open(input_path, "r", encoding="utf-8") as f:
        payload = json.load(f)

    service = MatchService(config.matching)
    if rank:
        request = RankCaregiversRequest.model_validate(payload)
        candidates = service.rank(request)
        logger.info(f"Ranked {len(request.caregivers)} caregivers, {len(candidates)} returned")
        return {
            "success": True,
            "count": len(candidates),
            "candidates": [c.to_dict() for c in candidates],
        }

    request = ComputeMatchRequest.model_validate(payload)
    return service.compute(request).to_dict()


def main():
    parser = argparse.ArgumentParser(description="CareMatch - score caregivers against a job")
    parser.add_argument('--input', type=str, required=True,
                        help='JSON file with job, family, children and caregiver(s)')
    parser.add_argument('--config', type=str, default='config.yaml',
                        help='Configuration file (default: config.yaml)')
    parser.add_argument('--rank', action='store_true',
                        help='Rank the "caregivers" list instead of scoring a single "caregiver"')
    args = parser.parse_args()

    # Configure logging
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        stream=sys.stderr
    )

    try:
        result = run(args.input, args.config, args.rank)
    except (OSError, json.JSONDecodeError) as e:
        logger.error(f"Could not read {args.input}: {e}")
        sys.exit(1)
    except (ValidationError, InvalidSnapshotException) as e:
        logger.error(f"Invalid input in {args.input}: {e}")
        sys.exit(1)

    print(json.dumps(result, indent=2, default=str))


if __name__ == "__main__":
    main()
