from .rectangle import Rectangle
from .node import Node, Region, CAPACITY, MAX_DEPTH
from .quadtree import Quadtree, \
        new_tree, \
        insert, \
        find, \
        update, \
        delete, \
        dump, \
        morton_curve
