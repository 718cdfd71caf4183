"""Quickstart example for cursorfixture.

This example demonstrates marking positions in a fixture, replaying cursors
at those positions, and reading diagnostics when something goes wrong.
"""

from cursorfixture import MalformedFixtureError, capture
from cursorfixture.testing import IntegerLiteral, scan_integer

# Example 1: Markers become cursors
print("=" * 50)
print("Example 1: Markers Become Cursors")
print("=" * 50)

result = capture("let 🌵()answer = 🌵()42;")
print(f"Document: {result.doc!r}")
print(f"Positions: {result.positions}")

for cursor in result:
    print(f"[{cursor.get_loc()}] current={cursor.current!r}")

# Example 2: Drive a scanner between marker pairs
print("\n" + "=" * 50)
print("Example 2: Scanning Between Markers")
print("=" * 50)

cursors = capture("sum(🌵()12🌵(), 🌵()7🌵())").iter()
for _ in range(2):
    start = cursors.next()
    end = cursors.next()
    literal = scan_integer(start, lambda c: c.current.isdigit())
    assert literal == IntegerLiteral(literal.value)
    print(f"{literal} stopped at {start.index}, marker at {end.index}")

# Example 3: Labelled markers and debug snippets
print("\n" + "=" * 50)
print("Example 3: Labels and print_debug()")
print("=" * 50)

result = capture("""fn main() {
    let x = 🌵(value)1;
}""")
cursor = result.cursor("value")
print(cursor.print_debug())

# Example 4: Malformed fixtures
print("\n" + "=" * 50)
print("Example 4: Malformed Fixture Diagnostics")
print("=" * 50)

try:
    capture("broken 🌵(marker")
except MalformedFixtureError as e:
    print(e)

print("\n" + "=" * 50)
print("[SUCCESS] All examples completed successfully!")
print("=" * 50)
