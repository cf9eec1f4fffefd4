#!/usr/bin/env python3
"""
Example usage of the toruslife package.
"""

from toruslife import PatternLibrary, Universe


def main():
    """Drive a universe by hand: render, then tick."""
    # The 64x64 reference universe, trimmed down for a readable demo
    universe = Universe.reference(16, 8)

    print("Reference pattern:")
    print(universe.render())
    print()

    for _ in range(3):
        universe.tick()
        print(f"Generation {universe.generation} (population {universe.population}):")
        print(universe.render())
        print()

    # Seed a glider and watch it cross the seams of a small torus
    library = PatternLibrary()
    glider = library.get_pattern("Glider")

    if glider:
        universe = Universe(8, 8, glider.as_seed(8, 8))
        start = universe.render()
        for _ in range(32):
            universe.tick()

        print("Glider after 32 generations on an 8x8 torus:")
        print(universe.render())
        print(f"Back at its starting cells: {universe.render() == start}")


if __name__ == "__main__":
    main()
