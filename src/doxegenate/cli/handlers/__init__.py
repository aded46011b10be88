from .annotate import handle_annotate, handle_preview, _annotate_single_file, _print_batch_summary
from .project import handle_headers
