BG = (15, 15, 15)
TRACK_OFF = (70, 70, 70)
TRACK_ON = (60, 200, 90)
KNOB = (235, 235, 235)
TEXT = (230, 230, 230)
DIALOG_BG = (35, 35, 35)
DIALOG_BORDER = (220, 70, 70)
