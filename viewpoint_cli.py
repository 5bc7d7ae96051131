#!/usr/bin/env python3

# Read a directed graph and report a vertex from which every vertex can
# be reached.  The input is a list of whitespace-separated integers:
# the number of vertices V, the number of edges E, and then E pairs
# "u v", one for each edge u -> v, with 0 <= u, v < V.

import argparse
import logging
import os
import sys

from viewpoint import Graph, InvalidVertex, find_roots, get_viewpoint

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

log = logging.getLogger(__name__)


# Return (V, edges) parsed from the text of an input file.  Raise
# ValueError if the text doesn't have that shape.
def parse_graph(text):
    tokens = text.split()
    if len(tokens) < 2:
        raise ValueError("expected vertex and edge counts")
    try:
        nums = [int(t) for t in tokens]
    except ValueError as e:
        raise ValueError("non-integer token in input: %s" % e) from None

    nverts, nedges = nums[0], nums[1]
    if nverts < 0 or nedges < 0:
        raise ValueError("counts must be non-negative, got %d %d" % (nverts, nedges))
    ends = nums[2:]
    if len(ends) != 2 * nedges:
        raise ValueError("expected %d edges, found %d endpoints"
                         % (nedges, len(ends)))
    return nverts, list(zip(ends[0::2], ends[1::2]))


def read_input(args):
    if args.input is None:
        return sys.stdin.read()
    with open(args.input) as f:
        return f.read()


def main(argv=None):
    parser = argparse.ArgumentParser(description='Find a viewpoint of a directed graph')
    parser.add_argument('--input', '-i', action='store', help='graph file (default: standard input)', required=False, metavar='FILE')
    parser.add_argument('--roots', '-r', action='store_true', help='print the roots of all source components instead')
    parser.add_argument('--verbose', '-v', action='store_true', help='log each step of the computation')
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format=LOG_FORMAT)

    if args.input is not None and not os.path.exists(args.input):
        print("%s doesn't exist" % args.input)
        sys.exit(1)

    try:
        text = read_input(args)
    except (OSError, UnicodeDecodeError) as e:
        print("Can't read %s: %s" % (args.input or "standard input", e))
        sys.exit(1)

    try:
        nverts, edges = parse_graph(text)
    except ValueError as e:
        print("Can't parse graph: %s" % e)
        sys.exit(1)

    try:
        g = Graph.build(nverts, edges)
    except InvalidVertex as e:
        print("Invalid edge: %s" % e)
        sys.exit(1)
    log.debug("read graph with %d vertices and %d edges", len(g), g.num_edges)

    if args.roots:
        print(','.join(str(r) for r in find_roots(g)))
        return 0

    vp = get_viewpoint(g)
    if vp is None:
        print("No viewpoint exists in the graph.")
    else:
        print("Found viewpoint: %d" % vp)
    return 0


if __name__ == '__main__':
    sys.exit(main())
