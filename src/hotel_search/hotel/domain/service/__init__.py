from .search_ranker import SearchRanker as SearchRanker
