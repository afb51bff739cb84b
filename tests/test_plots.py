import pandas as pd

from keyterms.plots import plot_keyness, render_wordcloud, safe_filename, save_wordclouds


def test_render_wordcloud_writes_png(tmp_path):
    path = render_wordcloud({"tax": 12.0, "health_care": 8.5, "war": -3.0}, tmp_path / "cloud.png", title="Reagan")
    assert path == tmp_path / "cloud.png"
    assert path.stat().st_size > 0


def test_render_wordcloud_without_positive_weights(tmp_path):
    assert render_wordcloud({"war": -3.0, "peace": 0.0}, tmp_path / "cloud.png") is None
    assert not (tmp_path / "cloud.png").exists()


def test_save_wordclouds_one_file_per_key(tmp_path):
    scores = {
        "George Washington": pd.Series({"union": 5.0, "militia": 3.0}),
        "John Adams": pd.Series({"navy": 4.0}),
        "Nobody": pd.Series({"tax": -2.0}),
    }
    written = save_wordclouds(scores, tmp_path / "clouds", max_words=10)
    assert set(written) == {"George Washington", "John Adams"}
    assert written["George Washington"].name == "George_Washington.png"
    assert sorted(p.name for p in (tmp_path / "clouds").iterdir()) == ["George_Washington.png", "John_Adams.png"]


def test_safe_filename():
    assert safe_filename(" Franklin D. Roosevelt ") == "Franklin_D._Roosevelt"


def test_plot_keyness(tmp_path):
    scores = pd.Series({"tax": 20.0, "cut": 9.0, "war": -15.0, "peace": -4.0, "union": 0.0})
    path = plot_keyness(scores, tmp_path / "plots" / "keyness.png", n=2)
    assert path.exists()


def test_save_wordclouds_keeps_colliding_keys_apart(tmp_path):
    scores = {
        "A B": pd.Series({"union": 5.0}),
        "A_B": pd.Series({"navy": 4.0}),
        "A/B": pd.Series({"tax": 3.0}),
    }
    written = save_wordclouds(scores, tmp_path)
    assert [p.name for p in written.values()] == ["A_B.png", "A_B_2.png", "A_B_3.png"]
    assert len(set(written.values())) == 3
    assert len(list(tmp_path.glob("*.png"))) == 3
