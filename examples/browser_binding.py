"""
List repositories through the browser binding.

Run from repo root:
  python examples/browser_binding.py

Reads examples/cmisbind.yaml unless CMISBIND_CONFIG points elsewhere. Any
setting can be overridden from the environment, e.g.
CMISBIND_BROWSER__URL=https://host/cmis/browser.
"""

import logging
from pathlib import Path

from cmisbind import CmisBindingsHelper, load_session_parameters


def main() -> None:
    logging.basicConfig(level=logging.DEBUG)

    # 1. Build read-only session parameters from YAML + environment.
    parameters = load_session_parameters(Path(__file__).parent / "cmisbind.yaml")

    # 2. Select and construct the binding. Collaborators are created lazily.
    binding = CmisBindingsHelper().create_binding(parameters)

    # 3. The first service call resolves the SPI, HTTP invoker and JSON converter.
    try:
        infos = binding.get_repository_service().get_repository_infos()
        for repository_id, info in infos.items():
            print(repository_id, info.get("repositoryName", ""))
    finally:
        binding.close()


if __name__ == "__main__":
    main()
