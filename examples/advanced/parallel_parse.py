"""Thread safe — parse 1000 manifests in parallel."""

from concurrent.futures import ThreadPoolExecutor

from modfile import parse

docs = [f'module "example.com/m{i}"\nrequire "example.com/dep" v1.{i}.0\n' for i in range(1000)]

with ThreadPoolExecutor(max_workers=8) as ex:
    results = list(ex.map(parse, docs))

print(f"Parsed {len(results)} manifests in parallel")
print("First doc requires:", results[0].requires[0])
print("Last doc requires:", results[-1].requires[0])
