"""Weighted location graphs, path search, preferences, storage and the route console."""