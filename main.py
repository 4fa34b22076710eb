#!/usr/bin/env python3
"""
Fuzzy Production Planning

Turns products with triangular fuzzy demand and price into a crisp linear
programming model text using the alpha-cut method.

Usage:
    python main.py [options]

Options:
    --problem FILE      Problem JSON filename (default: sample_problem.json)
    --alpha A           Confidence level in [0, 1] (default: 0.5)
    --products N        Number of active products (default: 4)
    --resources N       Number of active resources (default: 3)
    --labels LANG       Model text language: en or ro (default: en)
    --output FILE       Output model text filename (default: lp_model.txt)
    --json FILE         Also save a JSON report
    --verbose           Enable verbose logging
"""

import argparse
import sys
import logging
from typing import List, Optional

from fuzzylp import Config, SynthesisParams, setup_logging, get_default_config
from fuzzylp.utils import load_problem, save_text, save_json
from fuzzylp.synthesis import ModelSynthesizer, LABEL_SETS
from fuzzylp.reporters import print_results, format_alpha_table


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    default_config = get_default_config()
    defaults = default_config.synthesis_params
    parser = argparse.ArgumentParser(
        description="Fuzzy production planning LP model generator"
    )
    parser.add_argument(
        "--problem",
        type=str,
        default=default_config.problem_file,
        help="Filename of the problem JSON"
    )
    parser.add_argument(
        "--alpha",
        type=float,
        default=defaults.alpha,
        help="Confidence level alpha"
    )
    parser.add_argument(
        "--products",
        type=int,
        default=defaults.num_products,
        help="Number of active products"
    )
    parser.add_argument(
        "--resources",
        type=int,
        default=defaults.num_resources,
        help="Number of active resources"
    )
    parser.add_argument(
        "--labels",
        choices=sorted(LABEL_SETS),
        default=default_config.labels,
        help="Language of the model text labels"
    )
    parser.add_argument(
        "--output",
        type=str,
        default=default_config.output_file,
        help="Filename to save the model text"
    )
    parser.add_argument(
        "--json",
        type=str,
        default="",
        help="Filename to save a JSON report"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose logging"
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    # Setup logging
    log_level = logging.DEBUG if args.verbose else logging.INFO
    logger = setup_logging(level=log_level)

    try:
        config = Config(
            problem_file=args.problem,
            output_file=args.output,
            report_file=args.json,
            synthesis_params=SynthesisParams(
                alpha=args.alpha,
                num_products=args.products,
                num_resources=args.resources
            ),
            labels=args.labels,
            log_level=log_level
        )

        logger.info(f"Loading problem from {config.problem_file}...")
        products, resources = load_problem(config.problem_file)
        logger.info(f"Loaded {len(products)} products, {len(resources)} resources")

        params = config.synthesis_params

        # The editor keeps one usage slot per resource; missing slots are 0
        products = [product.padded(params.num_resources) for product in products]
        logger.debug(format_alpha_table(products[:max(0, params.num_products)], params.alpha))

        synthesizer = ModelSynthesizer(
            products=products,
            resources=resources,
            params=params,
            labels=LABEL_SETS[config.labels]
        )
        result = synthesizer.synthesize()

        print_results(result)

        save_text(result.text, config.output_file)
        logger.info(f"Model saved to {config.output_file}")

        if config.report_file:
            save_json(result.to_dict(), config.report_file)
            logger.info(f"Report saved to {config.report_file}")

        return 0

    except FileNotFoundError as e:
        logger.error(f"File not found: {e}")
        return 1
    except ValueError as e:
        logger.error(f"Data error: {e}")
        return 1
    except Exception as e:
        logger.exception(f"Unexpected error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
