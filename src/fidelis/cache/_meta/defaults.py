CACHE_BACKEND = "memory"
CACHE_FILEPATH = ".fidelis-cache.json"
