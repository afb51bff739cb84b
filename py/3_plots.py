from keyterms.batch import group_keyness
from keyterms.config import GROUP_COLUMN, RESULT_FILE, SPEECHES_CSV, TOP_N, WORDCLOUD_DIR
from keyterms.corpus import load_result, load_speeches
from keyterms.counts import build_dtm
from keyterms.config import configure_logging
from keyterms.plots import save_wordclouds

N_JOBS = -1

configure_logging()
df = load_speeches(SPEECHES_CSV)
result = load_result(RESULT_FILE)
assert len(df) == len(result.corpus), f"Row mismatch: csv={len(df)} vs corpus={len(result.corpus)}"

dtm = build_dtm(result.corpus)
batch = group_keyness(dtm, df[GROUP_COLUMN], n_jobs=N_JOBS)

for key, err in batch.errors.items():
    print(f"⚠️ {key}: skipped ({err})")

written = save_wordclouds(batch.scores, WORDCLOUD_DIR, max_words=TOP_N)
print(f"✓ {len(written)} word clouds saved to {WORDCLOUD_DIR}")
