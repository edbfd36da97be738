"""Natural-language resolution of bot settings instructions.

The resolver maps an English admin instruction ("turn off the chat input box") to an intent
(get/update/delete), a catalog setting key and, for updates, the value to assign.
"""
