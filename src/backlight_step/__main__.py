from backlight_step.cli import main

main()
