"""Small helpers for characters, strings, memory, numbers, lists, line reading and printf."""