"""Free-threading safe: highlight 1000 snippets in parallel."""

from concurrent.futures import ThreadPoolExecutor

from nanolight import highlight

snippets = [f"<script>let n{i} = {i};</script>" if i % 2 else f"const n{i} = {i};" for i in range(1000)]

with ThreadPoolExecutor(max_workers=8) as ex:
    results = list(ex.map(highlight, snippets))

print(f"Highlighted {len(results)} snippets in parallel")
print("First:", results[0])
print("Last:", results[-1])
