import argparse
import logging
import sys
from typing import List, Tuple

from canvasmap.config import get_config
from canvasmap.domain import AxisTransform
from canvasmap.utils import performance_logging


def _parse_floats(value: str, count: int, what: str) -> List[float]:
    parts = value.split(",")
    if len(parts) != count:
        raise argparse.ArgumentTypeError(
            f"{what} needs {count} comma separated values, got '{value}'"
        )
    try:
        return [float(part) for part in parts]
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"{what} contains a non numeric value: '{value}'"
        )


def parse_rectangle(value: str) -> List[float]:
    return _parse_floats(value, 4, "Rectangle")


def parse_point(value: str) -> Tuple[float, float]:
    x, y = _parse_floats(value, 2, "Point")
    return x, y


def _format_value(value: float, precision) -> str:
    if precision is None:
        return f"{value}"
    return f"{round(value, precision)}"


def run_transform(argv=sys.argv[1:]):
    parser = argparse.ArgumentParser(
        description="Map data space points onto a canvas",
        epilog="Use --data=X0,Y0,X1,Y1 and '--' before the points when "
        "values start with a minus sign.",
    )
    parser.add_argument(
        "--canvas",
        type=parse_rectangle,
        help="Canvas bounds x0,y0,x1,y1 (y increasing downward)",
        required=True,
    )
    parser.add_argument(
        "--data",
        type=parse_rectangle,
        help="Data bounds x0,y0,x1,y1 (y increasing upward)",
        required=True,
    )
    parser.add_argument(
        "--inverse",
        default=False,
        help="Map canvas points back to the data space",
        action="store_true",
    )
    parser.add_argument(
        "--precision",
        type=int,
        default=None,
        help="Round output to this number of decimals",
    )
    parser.add_argument(
        "points", type=parse_point, nargs="+", help="Points as x,y"
    )

    logger = logging.getLogger("run_transform")
    logging.basicConfig(
        stream=sys.stderr,
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    opts = parser.parse_args(argv)

    precision = opts.precision
    if precision is None:
        precision = get_config("precision")

    transform = AxisTransform(canvas=opts.canvas, data=opts.data)
    if opts.inverse:
        transform = transform.inverted()

    xs = [x for x, _ in opts.points]
    ys = [y for _, y in opts.points]
    with performance_logging(
        "transform", counter=len(opts.points), logger=logger
    ):
        p_x, p_y = transform.map(xs, ys)

    for x, y in zip(p_x, p_y):
        print(
            f"{_format_value(x, precision)},{_format_value(y, precision)}"
        )
