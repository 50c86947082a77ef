"""Graph search exercises: reachability, tree centres and the lock puzzle."""

from collections import defaultdict, deque

_LOCK_START = "0000"


def _adjacency(edges):
    neighbours = defaultdict(list)
    for u, v in edges:
        neighbours[u].append(v)
        neighbours[v].append(u)
    return neighbours


def valid_path(n, edges, source, destination):
    """Tell whether destination can be reached from source along undirected edges."""
    neighbours = _adjacency(edges)
    visited = {source}
    queue = deque([source])
    while queue:
        node = queue.popleft()
        if node == destination:
            return True
        for neighbour in neighbours[node]:
            if neighbour not in visited:
                visited.add(neighbour)
                queue.append(neighbour)
    return False


def find_min_height_trees(n, edges):
    """Return the roots that give a tree of n nodes its smallest height.

    Leaves are trimmed layer by layer until at most two nodes remain.
    """
    if n == 1:
        return [0]
    if len(edges) != n - 1:
        raise ValueError("a tree of n nodes needs exactly n - 1 edges")
    neighbours = _adjacency(edges)
    degrees = {node: len(adjacent) for node, adjacent in neighbours.items()}
    leaves = sorted(node for node, degree in degrees.items() if degree == 1)
    remaining = n
    while remaining > 2:
        if not leaves:
            raise ValueError("edges do not form a tree")
        next_leaves = []
        for leaf in leaves:
            for neighbour in neighbours[leaf]:
                degrees[neighbour] -= 1
                if degrees[neighbour] == 1:
                    next_leaves.append(neighbour)
        remaining -= len(leaves)
        leaves = next_leaves
    return leaves


def lock_neighbours(node):
    """Return the combinations one wheel turn away from node.

    Each digit wheel moves one step up or down, 9 wrapping to 0 and back;
    positions that are not digits are left alone.
    """
    result = []
    for index, char in enumerate(node):
        if not char.isdigit() or not char.isascii():
            continue
        digit = int(char)
        for turned in ((digit + 1) % 10, (digit - 1) % 10):
            result.append(f"{node[:index]}{turned}{node[index + 1:]}")
    return result


def open_lock(deadends, target):
    """Return the fewest turns from "0000" to target avoiding deadends, or -1."""
    blocked = set(deadends)
    if _LOCK_START in blocked:
        return -1
    if target == _LOCK_START:
        return 0
    distances = {_LOCK_START: 0}
    queue = deque([_LOCK_START])
    while queue:
        node = queue.popleft()
        if node == target:
            return distances[node]
        for neighbour in lock_neighbours(node):
            if neighbour not in blocked and neighbour not in distances:
                distances[neighbour] = distances[node] + 1
                queue.append(neighbour)
    return -1