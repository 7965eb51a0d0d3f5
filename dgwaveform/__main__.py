from dgwaveform.cli import entry_point


entry_point()
