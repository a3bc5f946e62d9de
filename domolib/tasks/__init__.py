"""
Higher-level methods to interact with the instance.

Each public function in this module should:

- perform a complete task, as needed by a script or user action
- avoid requests that change nothing, where the current state can be checked first
- create and manage a transport for the plumbing it calls
"""
