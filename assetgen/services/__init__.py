# Services package
from assetgen.services.assetlist_service import AssetlistService
from assetgen.services.canonical import reorder_properties
from assetgen.services.ibc_hash import apply_ibc_identity, ibc_hash
from assetgen.services.metadata_merger import merge_metadata
from assetgen.services.output_writer import AssetlistWriter
from assetgen.services.trace_builder import build_hop
from assetgen.services.trace_chain import TraceChain, normalize_trace_chain

__all__ = [
    "AssetlistService",
    "AssetlistWriter",
    "TraceChain",
    "apply_ibc_identity",
    "build_hop",
    "ibc_hash",
    "merge_metadata",
    "normalize_trace_chain",
    "reorder_properties",
]
