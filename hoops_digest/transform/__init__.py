"""Pure transformation pipeline from upstream payloads to canonical models.

Import submodules directly (``hoops_digest.transform.games``). This package
exports nothing because the models import ``transform.parsing``.
"""
