"""Rates, ranking and cross-repository aggregation."""

from reposcore.analyzers.aggregator import RepositoryAggregator
from reposcore.analyzers.ranker import ordinal_suffix, rank
from reposcore.analyzers.rates import RatePools, pools, rate, rates_for

__all__ = ["RepositoryAggregator", "RatePools", "ordinal_suffix", "pools", "rank", "rate", "rates_for"]
