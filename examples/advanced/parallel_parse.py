"""Thread safe — parse 1000 snippets in parallel."""

from concurrent.futures import ThreadPoolExecutor

from inkling import TextRenderer, parse

snippets = [f"Snippet *{i}* has _some ~struck~ text_" for i in range(1000)]

with ThreadPoolExecutor(max_workers=8) as ex:
    results = list(ex.map(parse, snippets))

print(f"Parsed {len(results)} snippets in parallel")
print("First snippet:", TextRenderer().render(results[0]))
print("Last snippet nodes:", len(results[-1]))
