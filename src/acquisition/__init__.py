from acquisition.download import DATASET_URL, ensure_dataset
from acquisition.fetchers import CurlFetcher, Fetcher, RequestsFetcher, select_fetcher
