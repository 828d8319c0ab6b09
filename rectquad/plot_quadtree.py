import matplotlib.pyplot as plt
import matplotlib.patches


def plot_quadtree(tree, curve=None, ax=None, out=None):
    '''
    Draw the node regions and stored rectangles of `tree`.

    @param curve    Optional pair of x and y sequences drawn as a red line,
                    e.g. the result of `morton_curve(tree)`.

    @param ax       Axes to draw into. A new figure is created if omitted.

    @param out      Filename to save the figure to. Without it, a newly
                    created figure is shown interactively.
    '''
    fig = None
    if ax is None:
        fig = plt.figure(figsize=(10,10))
        ax = fig.gca()

    x, y, w, h = tree.bounds
    ax.set_xlim((x, x + w))
    ax.set_ylim((y, y + h))

    _plot_node(ax, tree.root, radius=min(w, h) / 250)

    if curve is not None:
        ax.plot(*curve, 'r-')

    if out is not None:
        ax.figure.savefig(out)
        if fig is not None:
            plt.close(fig)
    elif fig is not None:
        plt.show()

    return ax


def _plot_node(ax, node, radius):
    x, y, w, h = node.region
    r = matplotlib.patches.Rectangle((x, y), w, h,
            fill=False,
            edgecolor='black',
            linewidth=1)

    ax.add_patch(r)
    if node.children is not None:
        for child in node.children:
            _plot_node(ax, child, radius)

    else:
        for rect in node.rectangles:
            p = matplotlib.patches.Rectangle((rect.x, rect.y), rect.width, rect.height,
                    color='blue',
                    alpha=0.2)
            c = matplotlib.patches.Circle((rect.x, rect.y), radius=radius, color='blue')
            ax.add_patch(p)
            ax.add_patch(c)
