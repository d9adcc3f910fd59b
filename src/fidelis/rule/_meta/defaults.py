DEBUG_RULE_ENGINE = False
CHECK_WORKING_MEMORY_ATTRS = True
