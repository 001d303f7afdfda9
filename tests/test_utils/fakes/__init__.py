from tests.test_utils.fakes.fetcher import FakeFetcher

__all__ = ["FakeFetcher"]
