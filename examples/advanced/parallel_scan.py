"""Thread-safe: scan 1000 programs in parallel with a shared pattern table."""

from concurrent.futures import ThreadPoolExecutor

from analiser import tokenize

programs = [f"programa p{i}\ninicio\n\tx := {i} * 0x1F;\nfim" for i in range(1000)]

with ThreadPoolExecutor(max_workers=8) as ex:
    results = list(ex.map(tokenize, programs))

print(f"Scanned {len(results)} programs in parallel")
print("Tokens per program:", len(results[0]))
