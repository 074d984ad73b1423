# %% [markdown]
# # fuzzymatch: Quickstart
#
# **Completion, search and ranking for interactive tools**
#
# ---
#
# ## Table of Contents
#
# | Part | Topic | Description |
# |------|-------|-------------|
# | 1 | Similarity | Jaro-Winkler scores and the yes/no predicate |
# | 2 | Abbreviations | QuickSilver scores and top-K ranking |
# | 3 | Search | Typo-tolerant search through a text buffer |
# | 4 | Engine | One configured matcher with its own cache |
# | 5 | Polars | The `.fuzzy` expression namespace |

# %%
import time

import polars as pl

import fuzzymatch as fm

# %% [markdown]
# ---
# ## Part 1: Similarity
#
# Jaro-Winkler rewards shared characters near the same position and gives a
# bonus to a shared prefix of up to four characters.

# %%
pairs = [("MARTHA", "MARHTA"), ("DWAYNE", "DUANE"), ("DIXON", "DICKSONX"), ("kitten", "sitting")]
for a, b in pairs:
    print(f"{a:>8} vs {b:<8}  jaro={fm.jaro_similarity(a, b):.3f}  "
          f"jaro_winkler={fm.jaro_winkler_similarity(a, b):.3f}")

# %% [markdown]
# `fuzzy_match` turns a score into a decision: the lengths may differ by at
# most `max_length_difference` and the score must reach `1 - error_rate`.

# %%
for candidate in ["kiten", "kitchen", "sitting", "kittens!!!"]:
    print(f"kitten ~ {candidate!r}: {fm.fuzzy_match('kitten', candidate)}")

# %% [markdown]
# ---
# ## Part 2: Abbreviations
#
# The abbreviation scorer favours characters that start words: `ff` fits
# `font-lock-fontify` better than `find-file`, and `fb` finds `FooBar`.

# %%
for target in ["find-file", "font-lock-fontify", "FooBar", "save-buffer"]:
    print(f"{target:>20}  ff={fm.abbrev_score(target, 'ff'):.3f}  "
          f"fb={fm.abbrev_score(target, 'fb'):.3f}")

# %% [markdown]
# `rank_abbrev` keeps the best `limit` candidates above `quality`, and can stop
# early after `timeout` seconds with whatever it has seen so far.

# %%
commands = [
    "find-file",
    "find-file-other-window",
    "font-lock-fontify-buffer",
    "fill-paragraph",
    "save-buffer",
    "switch-to-buffer",
    "kill-buffer",
    "forward-word",
]

start = time.perf_counter()
for result in fm.rank_abbrev(commands, "fb", limit=3, quality=0.5, timeout=0.05):
    print(f"{result.score:.3f}  {result.text}")
print(f"ranked in {(time.perf_counter() - start) * 1000:.2f} ms")

# %% [markdown]
# ---
# ## Part 3: Search
#
# `fuzzy_search` finds a query in a text even when the text contains a typo,
# forward from `start` or backward from it.

# %%
text = """The quick brown fox
jumps over the lazy dog.
Colour me surprised, the color of the fox was brown.
"""

span = fm.fuzzy_search("color", text)
print("forward :", span, repr(text[span[0]:span[1]]) if span else None)

span = fm.search_backward("color", text)
print("backward:", span, repr(text[span[0]:span[1]]) if span else None)

print("all     :", [text[s:e] for s, e in fm.fuzzy_finditer("brown", text)])

# %% [markdown]
# ---
# ## Part 4: Engine
#
# A `FuzzyMatcher` carries the thresholds and a score cache shared by every
# operation it runs. One matcher can be shared between threads.

# %%
matcher = fm.FuzzyMatcher(accept_error_rate=0.15, cache_size=1024)
print(matcher)
print(matcher.match("receive", "recieve"))
print(matcher.search("recieve", "we receive it"))
print(matcher.cache_info())

# %% [markdown]
# ---
# ## Part 5: Polars
#
# Importing fuzzymatch registers a `.fuzzy` namespace on Polars expressions.

# %%
df = pl.DataFrame({
    "typed": ["kiten", "recieve", "colour", None],
    "known": ["kitten", "receive", "color", "anything"],
})
print(df.with_columns(
    score=pl.col("typed").fuzzy.similarity(pl.col("known")),
    same=pl.col("typed").fuzzy.is_match(pl.col("known"), error_rate=0.15),
))

print(
    pl.DataFrame({"command": commands})
    .with_columns(score=pl.col("command").fuzzy.abbrev_score("fb"))
    .sort("score", descending=True)
    .head(3)
)
