# Namespace for pipeline steps
from .name_list import ReadNameList, SelectBatch, WriteRemainder, split_batch  # noqa: F401
from .enrich_profiles import EnrichBatch, LoadCachedTargets  # noqa: F401
