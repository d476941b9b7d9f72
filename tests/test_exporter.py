"""
Unit tests for the DataFrame/CSV reporting helpers.
"""
from reporting.exporter import (
    issues_to_df,
    not_found_to_df,
    redirects_to_df,
    scores_to_df,
    suggestions_to_df,
    to_csv_bytes,
)


class TestAnalysisFrames:

    def test_scores(self, engine, empty_input):
        analysis = engine.analyze("empty", empty_input)
        df = scores_to_df(analysis)

        assert list(df.columns) == ["Category", "Score", "Issues", "Grade"]
        assert len(df) == 9
        overall = df.iloc[-1]
        assert overall["Category"] == "Overall"
        assert overall["Score"] == analysis.overall_score.score
        assert overall["Grade"] == analysis.overall_score.grade
        assert overall["Issues"] == df["Issues"].iloc[:-1].sum()

    def test_issues_sorted_by_severity(self, engine, empty_input):
        df = issues_to_df(engine.analyze("empty", empty_input))

        severities = list(df["Severity"])
        assert severities[0] == "ERROR"
        assert severities == sorted(severities, key=["ERROR", "WARNING", "INFO", "SUCCESS"].index)

    def test_no_issues(self, engine, optimized_input):
        analysis = engine.analyze("p", optimized_input)
        assert issues_to_df(analysis).empty
        assert suggestions_to_df(analysis).empty

    def test_suggestions(self, engine, empty_input):
        df = suggestions_to_df(engine.analyze("empty", empty_input))
        assert list(df["Priority"]) == ["High", "Medium", "Medium"]
        assert df.iloc[0]["Category"] == "Meta Description"
        assert df.iloc[1]["Action"] == ""


class TestRedirectFrames:

    def test_redirects_sorted_by_hits(self, matcher):
        quiet = matcher.add_redirect("/a", "/b")
        busy = matcher.add_redirect("/c", "/d")
        matcher.record_hit(busy)

        df = redirects_to_df(matcher.rules)

        assert list(df["Source"]) == [busy.source, quiet.source]
        assert df.iloc[0]["Hits"] == 1

    def test_not_found(self, matcher):
        matcher.log_404("/x")
        matcher.log_404("/y")
        matcher.log_404("/y")

        df = not_found_to_df(matcher.top_404s())
        assert list(df["URL"]) == ["/y", "/x"]
        assert list(df["Hits"]) == [2, 1]

    def test_empty_frames_keep_columns(self):
        assert "Source" in redirects_to_df([]).columns
        assert "URL" in not_found_to_df([]).columns


class TestCsvBytes:

    def test_to_csv_bytes(self, engine, optimized_input):
        data = to_csv_bytes(scores_to_df(engine.analyze("p", optimized_input)))
        assert data.startswith(b"Category,Score,Issues,Grade\n")
        assert b"Overall,100,0,Excellent" in data
