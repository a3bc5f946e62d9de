"""
Low-level APIs for fine-grained instance management.

Each public function in this module should:

- perform a single API action (or a fixed sequence the API requires)
- raise an exception on any failures
- accept a `Transport` as its first argument rather than connecting by itself

Each function also falls into one of two groups:

- getters (prefixed with `get_`, returns a value directly, does not modify state)
- actions (returns a `Result` object, may modify state)
"""
