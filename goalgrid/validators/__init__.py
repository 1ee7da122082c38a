"""Market-specific validation rules for total goals, head-to-head, draw-no-bet, Asian and split handicap offers."""