from fidelis import setupModule

config, logger = setupModule(__name__)
