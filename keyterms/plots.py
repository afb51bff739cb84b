import logging
import re
from pathlib import Path

import matplotlib.pyplot as plt
import pandas as pd
import seaborn as sns
from wordcloud import WordCloud

from keyterms.config import TOP_N, WORDCLOUD_DIR, WORDCLOUD_PARAMS
from keyterms.counts import top_terms

logger = logging.getLogger(__name__)


def safe_filename(s):
    return re.sub(r"[^A-Za-z0-9_.\-]+", "_", str(s).strip())[:250]


def render_wordcloud(weights, path, title=None, max_words=TOP_N):
    """Draw the `max_words` highest positive weights; None if there are none."""
    weights = pd.Series(weights, dtype=float)
    weights = top_terms(weights[weights > 0], max_words)
    if weights.empty:
        logger.warning("No positive weights for %s; word cloud skipped", path)
        return None

    cloud = WordCloud(max_words=max_words, **WORDCLOUD_PARAMS).generate_from_frequencies(weights.to_dict())

    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    plt.figure(figsize=(10, 5))
    plt.imshow(cloud, interpolation="bilinear")
    plt.axis("off")
    if title:
        plt.title(title)
    plt.tight_layout()
    plt.savefig(path, dpi=150)
    plt.close()
    return path


def save_wordclouds(scores_by_key, out_dir: Path = WORDCLOUD_DIR, max_words=TOP_N):
    """One PNG per key, named after the key."""
    out_dir = Path(out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)
    written = {}
    used = set()
    for key, scores in scores_by_key.items():
        stem = base = safe_filename(key)
        n = 2
        while stem in used:
            stem = f"{base}_{n}"
            n += 1
        used.add(stem)
        if stem != base:
            logger.warning("%r collides with another key as %s.png; writing %s.png", key, base, stem)
        path = render_wordcloud(scores, out_dir / f"{stem}.png", title=str(key), max_words=max_words)
        if path is not None:
            written[key] = path
    return written


def plot_keyness(scores, path, n=15, title=None):
    """Bar chart of the `n` most over-used and `n` most under-used terms."""
    over = top_terms(scores[scores > 0], n)
    under = top_terms(scores[scores < 0], n, ascending=True)
    df = pd.concat([
        pd.DataFrame({"term": over.index, "llr": over.values, "direction": "over"}),
        pd.DataFrame({"term": under.index[::-1], "llr": under.values[::-1], "direction": "under"}),
    ], ignore_index=True)

    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    plt.figure(figsize=(8, max(3, 0.3 * len(df) + 1)))
    if not df.empty:
        sns.barplot(data=df, x="llr", y="term", hue="direction",
                    palette={"over": "steelblue", "under": "indianred"}, dodge=False)
    plt.axvline(0, color="black", linewidth=0.8)
    plt.xlabel("Signed log-likelihood")
    plt.ylabel("Term")
    plt.title(title or "Key terms")
    plt.tight_layout()
    plt.savefig(path, dpi=150)
    plt.close()
    return path
