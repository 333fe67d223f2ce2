from __future__ import annotations

import argparse

from commentflow.convert.extract import extract_block
from commentflow.convert.reflow import MODES, ReflowOptions, reflow_block
from commentflow.utils.logging import setup_logger


SAMPLE = """\
#' Summarise a numeric vector
#'
#' Computes the mean, the median and the standard deviation of `x`, dropping missing values first when asked to do so.
#'
#' - returns a named numeric vector
#' - never modifies `x`
#'
#' ```
#' summarise_vec(c(1, 2,   NA), na.rm = TRUE)
#' ```
#'
#' @param x A numeric vector of observations. Missing values are allowed and handled according to `na.rm`.
#' @param na.rm Whether missing values should be removed before the statistics are computed.
#' @return A named numeric vector with elements `mean`, `median` and `sd`.
#' @examples
#' summarise_vec(rnorm(10))
#' @export"""


def main():
    p = argparse.ArgumentParser(description="Demo runner for commentflow")
    p.add_argument("--width", type=int, action="append", help="Width to reflow at (repeatable)")
    p.add_argument("--mode", choices=MODES, default=MODES[0], help="Tag handling mode")
    p.add_argument("--wrap-lists", action="store_true", help="Wrap overlong list items")
    p.add_argument("--log-level", default="INFO", help="Log level")
    args = p.parse_args()

    logger = setup_logger(args.log_level)
    block = extract_block(SAMPLE.splitlines())
    options = ReflowOptions(mode=args.mode, wrap_lists=args.wrap_lists)
    for width in args.width or [40, 80]:
        logger.info(f"width={width} mode={args.mode}")
        print(reflow_block(block, width, options))
        print()


if __name__ == "__main__":
    main()
