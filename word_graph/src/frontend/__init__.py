"""
Presentation layers over wordgraph.Engine.

    python -m frontend       interactive menu (show graph, bridge words,
                             generate text, shortest path, PageRank,
                             random walk)
    python -m frontend.web   Flask JSON API + one-page UI

Both build one Engine at startup and only read from it afterwards.
"""
