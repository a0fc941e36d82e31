"""
graphbridge - Microsoft Graph CLI Bridge

Runs Microsoft Graph CLI (mgc) commands on behalf of a host command
framework, as if they were native operations.

Architecture:
- Each module is self-contained with clear interfaces
- Modules are completely replaceable
- All communication through defined interfaces

Modules:
- process: Spawning the CLI with captured output and a timeout
- locator: Finding the CLI executable on the host
- auth: One-time service principal login
- bridge: Invocation orchestration and result classification
- command: The "graph" host command
- api: Request and response models
"""

__version__ = "1.0.0"
