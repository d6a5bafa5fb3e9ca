"""
Renders the graphs of sdp files as png images.
"""


import argparse
import os
import sys

from sdpgraph.corpus import FORMATS, load_graphs


if __name__ == "__main__":
    aparser = argparse.ArgumentParser(
        description="plot the graphs of the input sdp file(s) as png files"
    )
    aparser.add_argument("input", help="input sdp file(s)", nargs="+")
    aparser.add_argument(
        "--format", "-f", choices=sorted(FORMATS), default=None,
        help="the sdp format, detected from the file header if omitted"
    )
    aparser.add_argument(
        "--limit", type=int, default=None,
        help="render at most this many graphs per file"
    )
    args = aparser.parse_args(sys.argv[1:])

    for i in args.input:
        if i.endswith(".sdp"):
            print(i, "...")
            directory = i[:-4]
            if not os.path.isdir(directory):
                os.makedirs(directory)
            for g in load_graphs(i, format=args.format)[: args.limit]:
                g.render_as_png(
                    os.path.join(directory, g.graph["id"] + ".png")
                )
