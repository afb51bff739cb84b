from keyterms.config import COLLOCATIONS_CSV, RESULT_FILE
from keyterms.corpus import load_result

TOP_N = 25  # change if needed

result = load_result(RESULT_FILE)
colls = result.collocations

print(f"Top {TOP_N} collocations (G2):\n")
print(colls.head(TOP_N)[["collocation", "count", "expected", "G2"]].to_string(index=False))

colls.to_csv(COLLOCATIONS_CSV, index=False)
print(f"\n✓ {len(colls)} collocations saved to {COLLOCATIONS_CSV}")
