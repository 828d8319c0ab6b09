#!/usr/bin/env python3

import sys
import json
import argparse
import logging

import numpy as np

from rectquad.rectangle import Rectangle
from rectquad.node import CAPACITY, MAX_DEPTH
from rectquad.quadtree import Quadtree, morton_curve


default_region = (-50, -50, 100, 100)


def load_json(f):
    logging.info('Loading rectangles from %s', f.name)

    data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError(F'expected a JSON object, got {type(data).__name__}')

    region = data.get('region')
    if region is not None:
        region = (region['x'], region['y'], region['width'], region['height'])
        if not all(isinstance(v, (int, float)) for v in region):
            raise ValueError(F'region values must be numbers, got {region}')

    rects = [ Rectangle.from_json(r) for r in data['rectangles'] ]
    return region, rects


def random_rectangles(region, count, seed=None, max_size=10):
    '''
    `count` rectangles anchored uniformly inside `region`, with sides drawn
    uniformly from [1, max_size).
    '''
    rng = np.random.default_rng(seed)
    x, y, w, h = region

    xs = rng.uniform(x, x + w, count)
    ys = rng.uniform(y, y + h, count)
    sizes = rng.uniform(1, max_size, size=(count, 2))

    return [ Rectangle(float(px), float(py), float(sw), float(sh))
            for px, py, (sw, sh) in zip(xs, ys, sizes) ]


def build_tree(region, rects, capacity=CAPACITY, max_depth=MAX_DEPTH):
    logging.info('Building quadtree over %s', region)

    tree = Quadtree(*region, capacity=capacity, max_depth=max_depth)
    n = tree.insert_many(rects)
    if n < len(rects):
        logging.warning('  %d of %d rectangles were outside of the region.', len(rects) - n, len(rects))

    logging.info('  Inserted %d rectangles, tree height %d.', n, tree.height())
    return tree


def apply_operations(tree, updates=(), deletes=(), finds=()):
    for x, y, w, h in updates:
        rect = tree.update(x, y, w, h)
        if rect is None:
            logging.info('Nothing to update at (%g, %g).', x, y)
        else:
            logging.info('Updated (%g, %g) to %s', x, y, rect)

    for x, y in deletes:
        logging.info('Deleted %d rectangle(s) at (%g, %g).', tree.delete(x, y), x, y)

    results = []
    for x, y in finds:
        rect = tree.find(x, y)
        results.append(F'({x:g}, {y:g}): {rect if rect is not None else "not found"}')

    return results


def main(argv=None):
    parser = argparse.ArgumentParser(prog='rectquad', description='Build a rectangle quadtree, query it and print its structure.')
    parser.add_argument('input', metavar='<input.json>', nargs='?', help='JSON file with a region and a list of rectangles', type=argparse.FileType('r'))
    parser.add_argument('--region', nargs=4, type=float, metavar=('X', 'Y', 'W', 'H'), help='Bounding region, overrides the input file')
    parser.add_argument('--random', type=int, default=0, metavar='N', help='Add N random rectangles')
    parser.add_argument('--seed', type=int, help='Seed for --random')
    parser.add_argument('--capacity', type=int, default=CAPACITY, help='Rectangles per leaf before it splits')
    parser.add_argument('--max-depth', type=int, default=MAX_DEPTH, help='Depth below which leaves no longer split')
    parser.add_argument('--update', nargs=4, type=float, action='append', default=[], metavar=('X', 'Y', 'W', 'H'))
    parser.add_argument('--delete', nargs=2, type=float, action='append', default=[], metavar=('X', 'Y'))
    parser.add_argument('--find', nargs=2, type=float, action='append', default=[], metavar=('X', 'Y'))
    parser.add_argument('--plot', metavar='<output image>', help='Save a plot of the tree with its Morton curve')
    parser.add_argument('-v', '--verbose', action='store_true')

    parsed = parser.parse_args(argv)

    logging.basicConfig(format='%(asctime)s %(levelname)8s  %(message)s',
            level=logging.DEBUG if parsed.verbose else logging.INFO,
            datefmt='%H:%M:%S')

    region, rects = None, []
    if parsed.input is not None:
        try:
            region, rects = load_json(parsed.input)
        except (KeyError, TypeError, ValueError) as e:
            logging.error('Invalid input file %s: %s', parsed.input.name, e)
            return 1

    if parsed.region is not None:
        region = tuple(parsed.region)
    if region is None:
        region = default_region

    try:
        rects += random_rectangles(region, parsed.random, parsed.seed)
        tree = build_tree(region, rects, parsed.capacity, parsed.max_depth)
        results = apply_operations(tree, parsed.update, parsed.delete, parsed.find)
    except (TypeError, ValueError) as e:
        logging.error('%s', e)
        return 1

    for line in results:
        print(line)
    print(tree.dump())

    if parsed.plot is not None:
        from rectquad.plot_quadtree import plot_quadtree

        logging.info('Writing plot to %s', parsed.plot)
        plot_quadtree(tree, curve=morton_curve(tree), out=parsed.plot)

    return 0


if __name__ == '__main__':
    sys.exit(main())
