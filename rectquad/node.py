import logging
from collections import namedtuple

from .rectangle import Rectangle


CAPACITY = 5
MAX_DEPTH = 20


class Region(namedtuple('Region', ('x', 'y', 'width', 'height'))):
    __slots__ = ()

    def contains(self, px, py):
        # half-open: [x, x + width) x [y, y + height)
        return self.x <= px < self.x + self.width \
                and self.y <= py < self.y + self.height


    def covers(self, px, py):
        return self.x <= px <= self.x + self.width \
                and self.y <= py <= self.y + self.height


    def midpoint(self):
        return self.x + self.width / 2, self.y + self.height / 2


    def quadrants(self):
        #
        # 0 | 1
        # -----
        # 2 | 3
        #
        # y grows upwards, so 0 and 1 are the top half
        w = self.width / 2
        h = self.height / 2

        return [
            Region(self.x, self.y + h, w, h),
            Region(self.x + w, self.y + h, w, h),
            Region(self.x, self.y, w, h),
            Region(self.x + w, self.y, w, h)
            ]


class Node:
    '''
    Quadtree node, either a leaf or an internal node.

    A leaf has `children is None` and keeps its rectangles in insertion
    order. An internal node has exactly four children, ordered top-left,
    top-right, bottom-left, bottom-right, and holds no rectangles itself.
    A leaf turns into an internal node when an insert overflows its
    capacity; internal nodes never turn back into leaves.
    '''

    def __init__(self, region, capacity=CAPACITY, max_depth=MAX_DEPTH, depth=0):
        self.region = region
        self.capacity = capacity
        self.max_depth = max_depth
        self.depth = depth

        self.rectangles = []
        self.children = None


    @property
    def is_leaf(self):
        return self.children is None


    def region_contains(self, px, py):
        return self.region.contains(px, py)


    def insert(self, rect):
        '''
        Store `rect` below this node, routed by its anchor (x, y).

        Returns False if the anchor lies outside of this node's closed
        region, True otherwise.
        '''
        if not self.region.covers(rect.x, rect.y):
            return False

        _recursive_insert(self, rect)
        return True


    def find(self, px, py):
        '''
        Return the first rectangle containing (px, py) in the leaf the point
        routes to, or None.
        '''
        if not self.region.covers(px, py):
            logging.debug('(%s, %s) is outside of %s.', px, py, self.region)
            return None

        leaf = _find_leaf(self, px, py)
        for rect in leaf.rectangles:
            if rect.contains(px, py):
                return rect

        logging.debug('Nothing is at (%s, %s).', px, py)
        return None


    def delete(self, px, py):
        '''
        Remove every rectangle containing (px, py) and return how many were
        removed. Internal nodes pass the delete on to all four children.
        '''
        if self.children is None:
            before = len(self.rectangles)
            self.rectangles = [ r for r in self.rectangles if not r.contains(px, py) ]
            return before - len(self.rectangles)

        return sum(child.delete(px, py) for child in self.children)


    def update(self, px, py, width, height):
        '''
        Replace the rectangle at (px, py) with one of the given size anchored
        at (px, py). Returns the new rectangle, or None if nothing was found.
        '''
        if self.find(px, py) is None:
            return None

        # built before deleting so a bad size leaves the tree untouched
        rect = Rectangle(px, py, width, height)
        self.delete(px, py)
        self.insert(rect)
        return rect


    def dump(self, level=0):
        indent = ' ' * (level * 4)

        if self.children is None:
            rects = ', '.join(map(str, self.rectangles))
            yield F'{indent}Leaf Node - [{rects}]'
        else:
            yield F'{indent}Internal Node'
            for child in self.children:
                yield from child.dump(level + 1)


    def iter_nodes(self):
        yield self
        if self.children is not None:
            for child in self.children:
                yield from child.iter_nodes()


    def iter_rectangles(self):
        # depth-first in quadrant order, i.e. Morton order over the quadrants
        if self.children is None:
            yield from self.rectangles
        else:
            for child in self.children:
                yield from child.iter_rectangles()


    def __len__(self):
        return sum(len(n.rectangles) for n in self.iter_nodes())


def _route(node, px, py):
    xm, ym = node.region.midpoint()

    idx = 0
    if px >= xm:
        idx += 1
    if py < ym:
        idx += 2

    return idx


def _find_leaf(node, px, py):
    while node.children is not None:
        node = node.children[_route(node, px, py)]

    return node


def _can_split(node, rect):
    if node.depth >= node.max_depth:
        return False

    # identical anchors always route to the same child, splitting cannot separate them
    return any(r.x != rect.x or r.y != rect.y for r in node.rectangles)


def _split(node):
    node.children = [
            Node(region, node.capacity, node.max_depth, node.depth + 1)
            for region in node.region.quadrants()
            ]
    held = node.rectangles
    node.rectangles = []

    for rect in held:
        _recursive_insert(node, rect)


def _recursive_insert(node, rect):
    if node.children is None and len(node.rectangles) < node.capacity:
        node.rectangles.append(rect)

    elif node.children is None and not _can_split(node, rect):
        logging.debug('Leaf %s at depth %d cannot split, holding %d rectangles.',
                node.region, node.depth, len(node.rectangles) + 1)
        node.rectangles.append(rect)

    elif node.children is None:
        _split(node)
        _recursive_insert(node, rect)

    else:
        _recursive_insert(node.children[_route(node, rect.x, rect.y)], rect)
