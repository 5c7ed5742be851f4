"""
WatchDog - net worth rankings from public asset disclosures.
"""
