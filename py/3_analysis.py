from pathlib import Path

import pandas as pd

from keyterms.config import DATA_DIR, GROUP_COLUMN, RESULT_FILE, SPEECHES_CSV
from keyterms.corpus import load_result, load_speeches
from keyterms.counts import build_dtm, top_terms
from keyterms.errors import EmptyVocabulary
from keyterms.llr import log_likelihood, p_values, significant
from keyterms.config import configure_logging
from keyterms.plots import plot_keyness, safe_filename

GROUP = "Barack Obama"
TOP_N = 25
P_LEVEL = 0.01
PLOT_OUTPUT_DIR = DATA_DIR / "analysis_plots"


def main():
    configure_logging()
    df = load_speeches(SPEECHES_CSV)
    result = load_result(RESULT_FILE)
    assert len(df) == len(result.corpus), f"Row mismatch: csv={len(df)} vs corpus={len(result.corpus)}"

    dtm = build_dtm(result.corpus)
    rows = (df[GROUP_COLUMN] == GROUP).to_numpy()
    target = dtm.term_counts(rows)
    comparison = dtm.term_counts(~rows)

    try:
        scores = log_likelihood(target, comparison)
    except EmptyVocabulary as e:
        print(f"⚠️ {GROUP}: {e}")
        return

    table = pd.DataFrame({
        "target": target,
        "comparison": comparison.reindex(scores.index, fill_value=0),
        "llr": scores,
        "p_value": p_values(scores),
    }).sort_values("llr", ascending=False)

    print(f"Documents: {rows.sum()} target / {(~rows).sum()} comparison")
    print(f"Significant at p<{P_LEVEL}: {len(significant(scores, P_LEVEL))} of {len(scores)} terms")

    print(f"\n-- Top {TOP_N} over-used by {GROUP} --")
    for term in top_terms(scores, TOP_N).index:
        row = table.loc[term]
        print(f"{term:25} {row['llr']:10.2f}  ({int(row['target'])} vs {int(row['comparison'])})")

    print(f"\n-- Top {TOP_N} under-used by {GROUP} --")
    for term in top_terms(scores, TOP_N, ascending=True).index:
        row = table.loc[term]
        print(f"{term:25} {row['llr']:10.2f}  ({int(row['target'])} vs {int(row['comparison'])})")

    out_csv = DATA_DIR / f"keyness_{safe_filename(GROUP)}.csv"
    table.rename_axis("term").to_csv(out_csv)
    plot_keyness(scores, Path(PLOT_OUTPUT_DIR) / f"keyness_{safe_filename(GROUP)}.png", title=f"Key terms: {GROUP}")
    print(f"\n✓ Keyness table saved to {out_csv}; plot saved to {PLOT_OUTPUT_DIR}")


if __name__ == "__main__":
    main()
