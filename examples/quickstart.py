# %% [markdown]
# # FuzzyUnify: Quickstart
#
# **One score, six opinions** - fuzzy string similarity without picking a metric
#
# ---
#
# ## The Problem
#
# Every fuzzy-matching metric has blind spots. Edit distance punishes
# reordering, Jaro-Winkler loves shared prefixes, n-gram overlap ignores
# position. FuzzyUnify runs six of them at once and averages the result.
#
# ```
# "Jon Smith"        vs  "John Smith"
# "123 Main St."     vs  "123 Main Street"
# "Micheal Johnson"  vs  "Michael Johnson"
# ```

# %%
import polars as pl

import fuzzyunify as fu

# %% [markdown]
# ## Part 1: The unified score

# %%
pairs = [
    ("John Smith", "Jon Smith"),
    ("123 Main Street", "123 Main St."),
    ("Michael Johnson", "Micheal Johnson"),
    ("kitten", "sitting"),
    ("apple", "orange"),
]

for source, target in pairs:
    print(f"{source!r:20} vs {target!r:20} -> {fu.unified_similarity(source, target):.3f}")

# Null and blank inputs score 0 rather than raising
print(fu.unified_similarity(None, "x"), fu.unified_similarity("   ", "x"))

# %% [markdown]
# ## Part 2: What went into it
#
# `compare_metrics` returns the per-metric scores the unified score is the
# mean of. Note the MinHash sketch is binary: it only reports whether the
# two strings' smallest shingle hashes agree.

# %%
for score in fu.compare_metrics("kitten", "sitting"):
    print(f"  {score.metric:16} {score.score:.3f}")

# %% [markdown]
# ## Part 3: Pick your metrics
#
# Average only the metrics you trust, or score with a single one.

# %%
print(fu.unified_similarity("kitten", "sitting", metrics=["levenshtein", "jaro_winkler"]))
print(fu.similarity_by_method("kitten", "sitting", fu.Metric.COSINE))

# %% [markdown]
# ## Part 4: Bring your own metric
#
# Any two-argument callable, or any object with a `compute(source, target)`
# method, plugs in.

# %%
def same_length(a: str, b: str) -> float:
    return 1.0 if len(a) == len(b) else 0.0


class FirstLetter:
    def compute(self, source: str, target: str) -> float:
        return 1.0 if source[0] == target[0] else 0.0


print(fu.similarity_by_method("abc", "xyz", same_length))
print(fu.unified_similarity("apple", "avocado", metrics=[FirstLetter(), "levenshtein"]))

# %% [markdown]
# ## Part 5: Polars
#
# Importing fuzzyunify registers a `.fuzzy` namespace on Polars expressions.

# %%
df = pl.DataFrame(
    {
        "crm_name": ["John Smith", "Michael Johnson", "Elizabeth Taylor"],
        "billing_name": ["Jon Smith", "Micheal Johnson", "Bob Williams"],
    }
)
print(
    df.with_columns(
        score=pl.col("crm_name").fuzzy.similarity(pl.col("billing_name")),
        same=pl.col("crm_name").fuzzy.is_similar(pl.col("billing_name"), min_similarity=0.6),
    )
)

# %% [markdown]
# ## Part 6: Thread pool
#
# Metrics run concurrently on a shared pool. Size it with
# `FUZZYUNIFY_MAX_WORKERS` or `configure`, or run everything inline.

# %%
fu.configure(max_workers=6)
fu.configure(threaded=False)
print(fu.unified_similarity("hello", "hallo"))
fu.configure()
