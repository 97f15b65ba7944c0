"""
Example: Routing over a small road network with wgraph

Builds an undirected road map, then runs every algorithm in the package on
it: single-source shortest paths, all-pairs distances, a minimum spanning
tree of the roads, and Bellman-Ford on a directed graph with a toll rebate.
"""

from wgraph import (
    NegativeCycleError,
    WeightedGraph,
    bellman_ford,
    dijkstra,
    floyd_warshall,
    prim_mst,
    shortest_path,
    total_weight,
)


def build_roads() -> WeightedGraph:
    roads = WeightedGraph()
    roads.add_edge("Depot", "Mill", 4)
    roads.add_edge("Depot", "Bridge", 2)
    roads.add_edge("Bridge", "Mill", 1)
    roads.add_edge("Mill", "Market", 5)
    roads.add_edge("Bridge", "Market", 8)
    roads.add_edge("Market", "Harbor", 3)
    return roads


def example_single_source(roads: WeightedGraph):
    print("=" * 60)
    print("Example 1: Dijkstra from the depot")
    print("=" * 60)

    dist, _ = dijkstra(roads, "Depot")
    for town, d in dist.items():
        print(f"  {town:<8} {d}")
    print(f"Route to harbor: {' -> '.join(shortest_path(roads, 'Depot', 'Harbor'))}")
    print()


def example_all_pairs(roads: WeightedGraph):
    print("=" * 60)
    print("Example 2: Floyd-Warshall distance table")
    print("=" * 60)

    result = floyd_warshall(roads)
    print("         " + " ".join(f"{town:>8}" for town in result.nodes))
    for town, row in zip(result.nodes, result.matrix):
        print(f"{town:<8} " + " ".join(f"{d:>8.0f}" for d in row))
    print()


def example_spanning_tree(roads: WeightedGraph):
    print("=" * 60)
    print("Example 3: Cheapest set of roads to keep every town connected")
    print("=" * 60)

    mst = prim_mst(roads)
    for u, v, w in mst:
        print(f"  {u} - {v} ({w})")
    print(f"Total length: {total_weight(mst)}")
    print()


def example_negative_weights():
    print("=" * 60)
    print("Example 4: Bellman-Ford with a toll rebate")
    print("=" * 60)

    routes = WeightedGraph(directed=True)
    routes.add_edge("Depot", "Toll", 6)
    routes.add_edge("Toll", "Market", -4)
    routes.add_edge("Depot", "Market", 3)

    dist, _ = bellman_ford(routes, "Depot")
    print(f"Cheapest cost to market: {dist['Market']}")

    routes.add_edge("Market", "Toll", 1)
    try:
        bellman_ford(routes, "Depot")
    except NegativeCycleError as exc:
        print(f"Rejected: {exc}")
    print()


if __name__ == "__main__":
    roads = build_roads()
    print("Adjacency list:")
    roads.print_graph()
    print()

    example_single_source(roads)
    example_all_pairs(roads)
    example_spanning_tree(roads)
    example_negative_weights()

    print("=" * 60)
    print("All examples completed successfully!")
    print("=" * 60)
