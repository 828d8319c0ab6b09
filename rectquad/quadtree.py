import logging
from math import isfinite
from operator import attrgetter

from .rectangle import Rectangle
from .node import Node, Region, CAPACITY, MAX_DEPTH


class Quadtree:
    '''
    Rectangle quadtree over a fixed bounding region.

    Rectangles are keyed by their anchor (x, y). The root never grows: a
    rectangle anchored outside of the bounding region is rejected and
    `insert` returns False.

    The tree is not thread-safe. Callers sharing a tree between threads
    must serialize inserts, updates and deletes, and must not read while
    another thread mutates.
    '''

    def __init__(self, x, y, width, height, capacity=CAPACITY, max_depth=MAX_DEPTH):
        if not all(map(isfinite, (x, y, width, height))):
            raise ValueError(F'Region must be finite, got {(x, y, width, height)}')
        if not (width > 0 and height > 0):
            raise ValueError(F'Region size must be positive, got {width}x{height}')
        if capacity < 1:
            raise ValueError(F'Capacity must be at least 1, got {capacity}')
        if max_depth < 0:
            raise ValueError(F'Maximum depth must not be negative, got {max_depth}')

        self.root = Node(Region(x, y, width, height), capacity, max_depth)


    @property
    def bounds(self):
        return self.root.region


    def insert(self, rect):
        if not self.root.insert(rect):
            logging.warning('%s lies outside of the tree bounds %s, not inserted.', rect, tuple(self.bounds))
            return False

        return True


    def insert_many(self, rects):
        return sum(1 for rect in rects if self.insert(rect))


    def find(self, px, py):
        return self.root.find(px, py)


    def update(self, px, py, width, height):
        return self.root.update(px, py, width, height)


    def delete(self, px, py):
        return self.root.delete(px, py)


    def dump(self):
        return '\n'.join(self.root.dump(0))


    def nodes(self):
        return self.root.iter_nodes()


    def height(self):
        return max(n.depth for n in self.root.iter_nodes())


    def __iter__(self):
        return self.root.iter_rectangles()


    def __len__(self):
        return len(self.root)


def new_tree(x, y, width, height, **kwargs):
    return Quadtree(x, y, width, height, **kwargs)


def insert(tree, rect):
    '''
    Insert `rect` into `tree`. `rect` may be a `Rectangle`, a mapping with
    the keys x, y, width and height, or an (x, y, width, height) sequence.
    '''
    if not isinstance(rect, Rectangle):
        rect = Rectangle.from_json(rect)

    return tree.insert(rect)


def find(tree, x, y):
    return tree.find(x, y)


def update(tree, x, y, new_width, new_height):
    return tree.update(x, y, new_width, new_height)


def delete(tree, x, y):
    return tree.delete(x, y)


def dump(tree):
    return tree.dump()


def morton_curve(tree):
    '''
    Rectangle anchors in traversal order, as a pair of x and y lists ready
    for `plot_quadtree(tree, curve=...)`.
    '''
    order = list(tree)
    return list(map(attrgetter('x'), order)), list(map(attrgetter('y'), order))
